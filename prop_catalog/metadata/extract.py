import re
import logging
from typing import Any, Dict, List, Optional, Tuple

from .. import config
from ..exceptions import FilenameParseError
from ..models import FlatFileRecord, Role, TractorPusher, ViewDirection
from .rules import MODIFIER_RULES, ModifierRule, apply_modifier_rules, parse_int, parse_number
from .tokenizer import SizeToken, split_image_name, tokenize
from .units import normalize_units

_COMPACT_SIZE_RE = re.compile(config.COMPACT_SIZE_PATTERN)

_TRACTOR_PUSHER_FLAGS = {
    config.PUSHER_FLAG: TractorPusher.PUSHER,
    config.TRACTOR_FLAG: TractorPusher.TRACTOR,
}

_SHORT_FORM_ROLES = {
    config.GEOM_KEYWORD: Role.GEOMETRY,
    config.THICK_KEYWORD: Role.THICKNESS,
}


class FieldExtractor:
    """
    Decodes UIUC file names into FlatFileRecords.

    Strategy (data files):
      1. Size token -> diameter/pitch, or a model label (maybe compact p/t form).
      2. Unit correction on the raw numbers.
      3. Optional modifiers (deg, blade count, specimen), in rule order.
      4. Role keyword; whatever is left is the test label and RPM.
    Image names share steps 1-3 and end with a view segment instead of a role.
    """

    def __init__(self, modifier_rules: Optional[List[ModifierRule]] = None):
        self.modifier_rules = modifier_rules if modifier_rules is not None else MODIFIER_RULES

    def parse_data_name(self, volume: str, volume_number: Optional[int], stem: str) -> FlatFileRecord:
        """
        Raises:
            FilenameParseError: the role cannot be determined.
        """
        tokens = tokenize(stem)
        base = dict(volume=volume, filename=stem,
                    manufacturer=tokens.manufacturer, volume_number=volume_number)

        if len(tokens.fields) < 2:
            raise FilenameParseError(stem, "no size or role token")

        if tokens.is_short_form:
            keyword = tokens.fields[1]
            role = _SHORT_FORM_ROLES.get(keyword)
            if role is None:
                raise FilenameParseError(stem, f"unrecognized role keyword '{keyword}'")
            return FlatFileRecord(role=role, **base)

        fields = self._size_fields(tokens.manufacturer, tokens.size)
        modifiers, consumed = apply_modifier_rules(tokens.rest, self.modifier_rules)
        self._merge_modifiers(fields, modifiers)

        remaining = tokens.rest[consumed:]
        fields.update(self._role_fields(stem, remaining))

        return FlatFileRecord(**base, **fields)

    def parse_image_name(self, volume: str, volume_number: Optional[int], name: str) -> FlatFileRecord:
        """
        Raises:
            FilenameParseError: the name has no view segment.
        """
        prefix, view = split_image_name(name)
        if view is None:
            raise FilenameParseError(name, "missing view segment")

        tokens = tokenize(prefix)
        fields: Dict[str, Any] = {}
        if tokens.size is not None:
            fields = self._size_fields(tokens.manufacturer, tokens.size)
            # Trailing tokens after the modifiers carry nothing we need
            modifiers, _ = apply_modifier_rules(tokens.rest, self.modifier_rules)
            self._merge_modifiers(fields, modifiers)

        direction = ViewDirection.FRONT if config.FRONT_MARKER in view else ViewDirection.SIDE

        return FlatFileRecord(
            volume=volume,
            filename=name,
            manufacturer=tokens.manufacturer,
            volume_number=volume_number,
            view_direction=direction,
            **fields,
        )

    def _size_fields(self, manufacturer: str, size: SizeToken) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        diameter = parse_number(size.diameter)
        pitch = None

        if diameter is None:
            fields['model'] = size.diameter
            compact = self._parse_compact_size(size.diameter)
            if compact is not None:
                diameter, fields['specimen'], fields['tractor_pusher'] = compact
        elif size.pitch is not None:
            pitch = parse_number(size.pitch)

        diameter, pitch = normalize_units(manufacturer, diameter, pitch)
        fields['diameter_in'] = diameter
        fields['pitch_in'] = pitch
        return fields

    @staticmethod
    def _parse_compact_size(token: str) -> Optional[Tuple[float, Optional[int], TractorPusher]]:
        """'12p1' -> (12.0, 1, PUSHER); '9t2' -> (9.0, 2, TRACTOR)."""
        if len(token) > config.COMPACT_SIZE_MAX_LEN:
            return None
        m = _COMPACT_SIZE_RE.match(token)
        if not m:
            return None
        return float(m.group(1)), parse_int(m.group(3)), _TRACTOR_PUSHER_FLAGS[m.group(2)]

    @staticmethod
    def _merge_modifiers(fields: Dict[str, Any], modifiers: Dict[str, Any]):
        for name, value in modifiers.items():
            # An unparseable modifier must not erase a value from the size token
            if value is None and fields.get(name) is not None:
                continue
            fields[name] = value

    @staticmethod
    def _role_fields(stem: str, tokens: List[str]) -> Dict[str, Any]:
        if not tokens:
            raise FilenameParseError(stem, "no role token after size/modifiers")

        keyword = tokens[0]
        if keyword == config.GEOM_KEYWORD:
            return {'role': Role.GEOMETRY}

        if keyword == config.STATIC_KEYWORD:
            label = tokens[1] if len(tokens) > 1 else None
            return {'role': Role.STATIC, 'test_label': label}

        # Wind-on run: <label>_<rpm>, or a bare <rpm>
        if len(tokens) == 1:
            label, rpm_token = None, tokens[0]
        else:
            label, rpm_token = tokens[0], tokens[1]

        rpm = parse_number(rpm_token)
        if rpm is None:
            logging.warning(f"{stem}: RPM token '{rpm_token}' is not numeric")
        return {'role': Role.PERFORMANCE, 'test_label': label, 'rpm': rpm}

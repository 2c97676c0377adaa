"""Layout-driven system information parser."""
from __future__ import annotations

from dataclasses import dataclass, field

from stealer_normalizer.models import TEXT_FIELDS, StealerFamily, SystemInfo

from .country import CountryNormalizer
from .dates import trim_date_annotations
from .grammar import (
    canonical_section,
    clean_value,
    combine_os,
    extract_ip,
    extract_section_from_separator,
    extract_username,
    extract_value,
    ini_section,
    is_indented,
    is_separator_line,
    is_valid_ip,
    normalize_line,
)
from .layout import OS_BUILD, OS_NAME, OS_VERSION, AdapterLayout, FieldRule, ListRule

_RECORD_FIELDS = frozenset(TEXT_FIELDS) | {"log_date"}


@dataclass
class ParseState:
    """Everything an adapter carries from one line to the next.

    Attributes
    ----------
    record : SystemInfo
        The record being filled.
    section : str
        The current section tag, empty outside of any section.
    scratch : dict of str to str
        Intermediate values which aren't record fields (OS name, version...).
    active_list : ListRule, optional
        The list whose items are being collected.
    items : list of str
        The items collected so far for ``active_list``.
    pending : FieldRule, optional
        A rule waiting for the next line to read its value.

    """

    record: SystemInfo
    section: str = ""
    scratch: dict[str, str] = field(default_factory=dict)
    active_list: ListRule | None = None
    items: list[str] = field(default_factory=list)
    pending: FieldRule | None = None

    def is_set(self, name: str) -> bool:
        if name in _RECORD_FIELDS:
            return self.record.is_set(name)
        return name in self.scratch

    def assign(self, name: str, value: str | None) -> bool:
        """First-write-wins assignment of a record field or scratch slot."""
        if name in _RECORD_FIELDS:
            return self.record.set_once(name, value)

        if value is None or name in self.scratch:
            return False

        self.scratch[name] = value
        return True


class LayoutAdapter:
    """Parse system information files written in a given layout.

    Parameters
    ----------
    layout : AdapterLayout
        The family's layout.
    country_normalizer : CountryNormalizer, optional
        The country to ISO code lookup.

    """

    def __init__(
        self,
        layout: AdapterLayout,
        country_normalizer: CountryNormalizer | None = None,
    ) -> None:
        self.layout = layout
        self.country_normalizer = country_normalizer or CountryNormalizer()

    @property
    def family(self) -> StealerFamily:
        return self.layout.family

    def parse(self, content: str, filename: str = "") -> SystemInfo:
        """Fold the file's lines into a system information record.

        Parameters
        ----------
        content : str
            The decoded file content.
        filename : str, optional
            The file's name.

        Returns
        -------
        SystemInfo
            The record, with raw (not yet normalized) date.

        """
        state = ParseState(record=SystemInfo(stealer_type=self.family))

        for raw_line in content.splitlines():
            self._step(state, raw_line)

        self._close_list(state)
        self._finish(state)

        return state.record

    def _step(self, state: ParseState, raw_line: str) -> None:
        line = normalize_line(raw_line)
        lowered = line.lower()

        if state.pending is not None:
            rule, state.pending = state.pending, None
            self._apply(state, rule, line)

        if is_separator_line(raw_line):
            self._close_list(state)
            self._update_section_from_separator(state, raw_line)
            return

        if self.layout.ini_sections:
            name = ini_section(line)
            if name:
                self._close_list(state)
                state.section = canonical_section(name)
                return

        if state.active_list is not None:
            item = self._continuation(state.active_list, raw_line, line)
            if item is not None:
                if item:
                    state.items.append(item)
                return
            self._close_list(state)

        for label, section in self.layout.section_headers.items():
            if label in lowered:
                state.section = section
                return

        for hook in self.layout.line_hooks:
            if hook(line, lowered, state):
                return

        for list_rule in self.layout.lists:
            if state.is_set(list_rule.field):
                continue
            if list_rule.matches(lowered, state.section):
                self._open_list(state, list_rule, line)
                return

        for rule in self.layout.rules:
            if state.is_set(rule.field) or not rule.matches(lowered, state.section):
                continue
            if rule.next_line:
                state.pending = rule
                continue
            self._apply(state, rule, extract_value(line))

    def _update_section_from_separator(self, state: ParseState, raw_line: str) -> None:
        if not raw_line.strip():
            return

        title = extract_section_from_separator(raw_line)

        if title and self.layout.separator_sections:
            state.section = canonical_section(title)
        elif self.layout.separator_resets_section:
            state.section = ""

    def _open_list(self, state: ParseState, rule: ListRule, line: str) -> None:
        value = clean_value(extract_value(line))

        if value is not None and rule.collapse is None:
            state.assign(rule.field, value)
            return

        state.active_list = rule
        state.items = []

    def _continuation(self, rule: ListRule, raw_line: str, line: str) -> str | None:
        """Return the item carried by a continuation line, None otherwise."""
        lowered = line.lower()

        if any(label in lowered for label in rule.labels):
            return None

        match rule.continuation:
            case "indented":
                return line if is_indented(raw_line) else None

            case "block":
                return line

            case "numbered":
                head, _, item = line.partition(")")
                return item.strip() if head.isdigit() and item else None

            case "labelled":
                if rule.item_label and lowered.startswith(rule.item_label):
                    return extract_value(line)
                return None

        return None

    def _close_list(self, state: ParseState) -> None:
        rule = state.active_list
        if rule is None:
            return

        items = [item for item in state.items if clean_value(item)]
        state.active_list = None
        state.items = []

        if rule.collapse is not None:
            rule.collapse(items, state)
            state.assign(rule.field, ", ".join(items) or None)
            return

        if not items:
            return

        value = rule.join.join(items) if rule.join else items[0]
        state.assign(rule.field, clean_value(value))

    def _apply(self, state: ParseState, rule: FieldRule, value: str) -> None:
        if state.is_set(rule.field):
            return

        if rule.reject and any(token in value.lower() for token in rule.reject):
            return

        pattern = rule.compiled["pattern"]

        if pattern is not None:
            match = pattern.search(value)
            if match:
                groups = [group for group in match.groups() if group is not None]
                value = groups[0] if groups else match.group(0)
            elif rule.require_pattern:
                return

        for regex, replacement in rule.compiled["substitutions"]:
            value = regex.sub(replacement, value)

        cleaned = clean_value(value)

        if cleaned is not None and rule.transform:
            cleaned = clean_value(self._transform(rule.transform, cleaned))

        if cleaned is not None and rule.field == "log_date":
            cleaned = trim_date_annotations(cleaned)

        state.assign(rule.field, cleaned)

    def _transform(self, name: str, value: str) -> str | None:
        match name:
            case "ip":
                return extract_ip(value)

            case "username":
                return extract_username(value)

            case "country":
                return self.country_normalizer.code_or_original(value)

            case "country_not_ip":
                if is_valid_ip(value) or is_valid_ip(extract_ip(value)):
                    return None
                return self.country_normalizer.code_or_original(value)

        raise ValueError(f"Unknown value transform '{name}'.")

    def _finish(self, state: ParseState) -> None:
        if not self.layout.combine_os:
            return

        version = state.scratch.get(OS_VERSION)
        build = state.scratch.get(OS_BUILD)

        if version and build:
            version = f"{version} ({build})"

        state.assign("os", clean_value(combine_os(state.scratch.get(OS_NAME), version)))

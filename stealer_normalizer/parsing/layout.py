"""Declarative description of a stealer's system information layout.

A layout lists, in priority order, which labels feed which record fields, the
section each label is valid in, and how list-valued fields are written. The shared
engine in :mod:`stealer_normalizer.parsing.engine` runs every layout.
"""
from __future__ import annotations

import re
from functools import cached_property
from typing import Callable, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from stealer_normalizer.models import StealerFamily

MatchMode = Literal["startswith", "contains", "word", "all"]
Transform = Literal["ip", "username", "country", "country_not_ip"]
Continuation = Literal["indented", "block", "numbered", "labelled"]

# Scratch slots combined into the ``os`` field once the file is read.
OS_NAME = "os_name"
OS_VERSION = "os_version"
OS_BUILD = "os_build"


class LabelMatcher(BaseModel):
    """Match a lower-cased, normalized line against a set of labels.

    ``word`` finds a label anywhere in the line as long as no letter precedes it,
    so ``os:`` matches ``Host OS:`` but not ``BIOS:``.
    """

    labels: List[str]
    match: MatchMode = "startswith"
    sections: List[str] = Field(default_factory=list)

    @cached_property
    def label_pattern(self) -> re.Pattern:
        alternatives = "|".join(re.escape(label) for label in self.labels)
        return re.compile(rf"(?<![a-z])(?:{alternatives})")

    def matches(self, lowered: str, section: str) -> bool:
        if self.sections and section not in self.sections:
            return False

        if self.match == "startswith":
            return lowered.startswith(tuple(self.labels))
        if self.match == "contains":
            return any(label in lowered for label in self.labels)
        if self.match == "word":
            return bool(self.label_pattern.search(lowered))
        return all(label in lowered for label in self.labels)


class FieldRule(LabelMatcher):
    """Assign a record field, or a scratch slot, from a labelled line.

    Attributes
    ----------
    field : str
        The ``SystemInfo`` field or scratch slot to fill.
    pattern : str, optional
        Regex searched in the value. Its first matching group becomes the value.
    require_pattern : bool
        Skip the line when ``pattern`` doesn't match. Otherwise keep the value.
    substitutions : list of (str, str)
        Regex substitutions applied in order after ``pattern``.
    transform : str, optional
        Named value transform applied last.
    reject : list of str
        Lower-case substrings which make the value unusable.
    next_line : bool
        Read the value from the line following the label.

    """

    field: str
    pattern: Optional[str] = None
    require_pattern: bool = True
    substitutions: List[Tuple[str, str]] = Field(default_factory=list)
    transform: Optional[Transform] = None
    reject: List[str] = Field(default_factory=list)
    next_line: bool = False

    @cached_property
    def compiled(self) -> Dict[str, object]:
        return {
            "pattern": re.compile(self.pattern) if self.pattern else None,
            "substitutions": [
                (re.compile(regex), replacement)
                for regex, replacement in self.substitutions
            ],
        }


class ListRule(LabelMatcher):
    """A field whose header line may be followed by one item per line.

    A header carrying an inline value assigns it directly. Otherwise the items
    are collected until a line which isn't a continuation, then collapsed to the
    first item, joined with ``join``, or handed over to ``collapse``.
    """

    field: str
    continuation: Continuation = "indented"
    item_label: Optional[str] = None
    join: Optional[str] = None
    collapse: Optional[Callable[..., None]] = None


class AdapterLayout(BaseModel):
    """Full description of one family's system information file.

    Attributes
    ----------
    family : StealerFamily
        The family the layout belongs to.
    ini_sections : bool
        ``[Section]`` lines set the current section.
    separator_sections : bool
        ``--- Title ---`` lines set the current section.
    separator_resets_section : bool
        Other non-blank separator lines clear the current section.
    section_headers : dict of str to str
        Lower-case labels which, found in a line, switch to the given section.
    lists : list of ListRule
        List-valued fields, checked before ``rules``.
    rules : list of FieldRule
        Field rules, in priority order.
    combine_os : bool
        Build ``os`` from the OS name, version and build scratch slots.
    line_hooks : list of callable
        ``(line, lowered, state) -> bool`` callbacks run before lists and rules.
        Returning True consumes the line.

    """

    family: StealerFamily
    ini_sections: bool = False
    separator_sections: bool = False
    separator_resets_section: bool = False
    section_headers: Dict[str, str] = Field(default_factory=dict)
    lists: List[ListRule] = Field(default_factory=list)
    rules: List[FieldRule] = Field(default_factory=list)
    combine_os: bool = False
    line_hooks: List[Callable[..., bool]] = Field(default_factory=list)

import textwrap

from stealer_normalizer.models import StealerFamily, SystemInfo
from stealer_normalizer.parsing.engine import LayoutAdapter, ParseState
from stealer_normalizer.parsing.layout import AdapterLayout, FieldRule, ListRule


def test_parse_state_first_write_wins():
    state = ParseState(record=SystemInfo())

    assert state.assign("cpu", "Intel")
    assert not state.assign("cpu", "AMD")
    assert not state.assign("gpu", None)
    assert state.assign("os_name", "Windows")
    assert not state.assign("os_name", "Linux")

    assert state.record.cpu == "Intel"
    assert state.scratch == {"os_name": "Windows"}
    assert state.is_set("cpu")
    assert not state.is_set("gpu")


def test_field_rule_matching_modes():
    startswith = FieldRule(field="os", labels=["os:"])
    contains = FieldRule(field="os", labels=["os name:"], match="contains")
    every = FieldRule(field="cpu", labels=["cpu", "processor"], match="all")
    scoped = FieldRule(field="cpu", labels=["cpu:"], sections=["hardware"])

    assert startswith.matches("os: windows", "")
    assert not startswith.matches("bios: ami", "")
    assert contains.matches("- host os name: windows", "")
    assert every.matches("cpu (processor): intel", "")
    assert not every.matches("cpu: intel", "")
    assert scoped.matches("cpu: intel", "hardware")
    assert not scoped.matches("cpu: intel", "network")


def test_layout_adapter_lists_and_sections():
    layout = AdapterLayout(
        family=StealerFamily.GENERIC,
        separator_sections=True,
        lists=[
            ListRule(field="antivirus", labels=["antivirus:"], join=" | "),
            ListRule(field="gpu", labels=["gpus:"], continuation="numbered"),
        ],
        rules=[
            FieldRule(field="cpu", labels=["cpu:"], sections=["hardware"]),
            FieldRule(field="ram", labels=["ram:"], pattern=r"(\d+ GB)"),
            FieldRule(field="hwid", labels=["hwid:"], substitutions=[(r"-", "")]),
        ],
    )
    sample = textwrap.dedent(
        """
        CPU: Outside
        --- Hardware ---
        CPU: Inside
        RAM: about 16 GB
        HWID: AB-CD
        Antivirus:
          Defender
          Avast

        GPUs:
        1) RTX 3060
        2) Intel UHD
        """
    )
    info = LayoutAdapter(layout).parse(sample)

    assert info.cpu == "Inside"
    assert info.ram == "16 GB"
    assert info.hwid == "ABCD"
    assert info.antivirus == "Defender | Avast"
    assert info.gpu == "RTX 3060"


def test_required_pattern_skips_the_line():
    layout = AdapterLayout(
        family=StealerFamily.GENERIC,
        rules=[FieldRule(field="ram", labels=["ram:"], pattern=r"(\d+ GB)")],
    )
    info = LayoutAdapter(layout).parse("RAM: lots\nRAM: 8 GB\n")
    assert info.ram == "8 GB"


def test_inline_list_value_is_assigned_directly():
    layout = AdapterLayout(
        family=StealerFamily.GENERIC,
        lists=[ListRule(field="gpu", labels=["gpu:"])],
    )
    info = LayoutAdapter(layout).parse("GPU: Radeon\n  - ignored\n")
    assert info.gpu == "Radeon"


def test_line_hook_consumes_the_line():
    seen = []

    def hook(line, lowered, state):
        seen.append(line)
        if lowered.startswith("combo:"):
            state.assign("cpu", "from hook")
            return True
        return False

    layout = AdapterLayout(
        family=StealerFamily.GENERIC,
        line_hooks=[hook],
        rules=[FieldRule(field="cpu", labels=["combo:"])],
    )
    info = LayoutAdapter(layout).parse("Combo: from rule\n")

    assert info.cpu == "from hook"
    assert seen == ["Combo: from rule"]

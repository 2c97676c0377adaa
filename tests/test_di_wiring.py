import pytest
from dependency_injector import providers

from stealer_normalizer.config import Settings
from stealer_normalizer.containers import AppContainer
from stealer_normalizer.models import RawFile
from stealer_normalizer.parsing.registry import AdapterRegistry
from stealer_normalizer.storage import MemorySink, RecordSink


@pytest.fixture
def container():
    c = AppContainer()
    c.wire(modules=[__name__])
    c.init_resources()
    try:
        yield c
    finally:
        c.shutdown_resources()
        c.unwire()


def test_can_resolve_core_services(container: AppContainer):
    assert container.logger() is not None
    assert container.signature_detector() is not None
    assert container.credential_extractor() is not None

    # Singletons are shared
    registry = container.adapter_registry()
    assert isinstance(registry, AdapterRegistry)
    assert registry is container.adapter_registry()

    leak_processor = container.leak_processor()
    assert leak_processor.system_info_processor.adapter_registry is registry
    assert (
        leak_processor.system_info_processor.sink
        is leak_processor.credential_processor.sink
    )


def test_settings_flow_into_services(container: AppContainer):
    container.config.override(
        providers.Singleton(Settings, max_workers=3, binary_printable_ratio=0.5)
    )
    try:
        assert container.system_info_processor().settings.max_workers == 3
        assert container.signature_detector().printable_ratio == 0.5
    finally:
        container.config.reset_override()


def test_sink_override(container: AppContainer):
    class RecordingSink(RecordSink):
        def __init__(self):
            self.saved = []

        def save_system_information(self, device_id, info, source_filename):
            self.saved.append((device_id, source_filename, info.stealer_type))

        def save_credentials(self, device_id, credentials):
            self.saved.extend((device_id, c.url) for c in credentials)

    sink = RecordingSink()
    container.sink.override(sink)
    try:
        processor = container.system_info_processor()
        result = processor.process_files("DEVICE", [RawFile("System.txt", "LID: x\n")])

        assert result.success == 1
        assert sink.saved == [("DEVICE", "System.txt", "Lumma")]
        assert not isinstance(container.sink(), MemorySink)
    finally:
        container.sink.reset_override()

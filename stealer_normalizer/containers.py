"""Dependency injection containers for the stealer-normalizer application."""

from __future__ import annotations

from dependency_injector import containers, providers

from stealer_normalizer.config import Settings
from stealer_normalizer.helpers import init_logger
from stealer_normalizer.parsing.country import CountryNormalizer
from stealer_normalizer.parsing.credentials import CredentialExtractor
from stealer_normalizer.parsing.registry import AdapterRegistry
from stealer_normalizer.parsing.signatures import SignatureDetector
from stealer_normalizer.services.credential_processor import CredentialProcessor
from stealer_normalizer.services.leak_processor import LeakProcessor
from stealer_normalizer.services.system_info_processor import SystemInfoProcessor
from stealer_normalizer.storage import MemorySink


class AppContainer(containers.DeclarativeContainer):
    """Main application container."""

    config = providers.Singleton(Settings)
    logger = providers.Singleton(
        init_logger, "stealer_normalizer", config.provided.log_level
    )

    # Normalization engine
    country_normalizer = providers.Singleton(CountryNormalizer)
    signature_detector = providers.Singleton(
        SignatureDetector,
        logger=logger,
        printable_ratio=config.provided.binary_printable_ratio,
    )
    adapter_registry = providers.Singleton(
        AdapterRegistry,
        logger=logger,
        country_normalizer=country_normalizer,
    )
    credential_extractor = providers.Singleton(CredentialExtractor)

    # Storage collaborator, override to persist elsewhere.
    sink = providers.Singleton(MemorySink)

    system_info_processor = providers.Factory(
        SystemInfoProcessor,
        adapter_registry=adapter_registry,
        signature_detector=signature_detector,
        sink=sink,
        logger=logger,
        settings=config,
    )
    credential_processor = providers.Factory(
        CredentialProcessor,
        credential_extractor=credential_extractor,
        sink=sink,
        logger=logger,
        settings=config,
    )

    leak_processor = providers.Factory(
        LeakProcessor,
        system_info_processor=system_info_processor,
        credential_processor=credential_processor,
        logger=logger,
    )

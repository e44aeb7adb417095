"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import athyg

    assert athyg.__version__


def test_public_api() -> None:
    """Verify the top-level exports are available."""
    from athyg import (
        ArityMismatchError,
        AthygError,
        CatalogLoader,
        InvalidPathError,
        SchemaRegistry,
        SchemaVersion,
        StarV1,
        StarV2,
        StarV3,
        load,
    )

    assert issubclass(InvalidPathError, AthygError)
    assert issubclass(ArityMismatchError, AthygError)
    assert CatalogLoader is not None
    assert SchemaRegistry is not None
    assert SchemaVersion is not None
    assert StarV1 is not None
    assert StarV2 is not None
    assert StarV3 is not None
    assert load is not None


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from athyg.config import CatalogConfig, LoaderConfig, LoggingConfig, load_config

    assert CatalogConfig is not None
    assert LoaderConfig is not None
    assert LoggingConfig is not None
    assert load_config is not None


def test_logging_configuration() -> None:
    """Verify logging can be configured and used."""
    from athyg.utils.logging import configure_logging, get_logger, log_context

    configure_logging(level="DEBUG", json_output=True)
    log = get_logger("athyg.test")
    with log_context(path="stars.csv"):
        log.debug("Logging configured")
    configure_logging(level="WARNING")

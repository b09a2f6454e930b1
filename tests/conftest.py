import pytest

from roswire.core.models.config import CodecConfig, TrailingPolicy


@pytest.fixture
def config() -> CodecConfig:
    return CodecConfig()


@pytest.fixture
def lenient_config() -> CodecConfig:
    return CodecConfig(trailing=TrailingPolicy.WARN)


@pytest.fixture
def small_config() -> CodecConfig:
    return CodecConfig(max_sequence_length=8, max_message_size=64)


@pytest.fixture
def buffer() -> bytearray:
    return bytearray()

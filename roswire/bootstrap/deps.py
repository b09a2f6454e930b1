import json
from functools import lru_cache

from pydantic import ValidationError

from roswire.bootstrap.config.settings import CodecSettings
from roswire.core.helpers.utils import setup_logging
from roswire.core.models.config import CodecConfig
from roswire.infra.rosmsg_serializer import RosMsgSerializer


@lru_cache
def get_settings() -> CodecSettings:
    try:
        settings = CodecSettings()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise ValueError("\n".join(msg)) from ex

    setup_logging(settings.log_level)
    return settings


def get_codec_config() -> CodecConfig:
    return get_settings().to_codec_config()


def get_serializer(message_type: type) -> RosMsgSerializer:
    return RosMsgSerializer(message_type, get_codec_config())

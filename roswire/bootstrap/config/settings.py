from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from roswire.bootstrap.config.loader import get_configfile
from roswire.core.models.config import CodecConfig, TrailingPolicy


class CodecSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ROSWIRE_",
        extra="ignore"
    )

    max_sequence_length: Annotated[
        int,
        Field(
            description=(
                "Maximum element count accepted from a variable-length sequence prefix.\n"
                "A decoded count above this limit fails with CountOverflow before\n"
                "anything is allocated."
            ),
            default=16 * 1024 * 1024,
            gt=0
        )
    ]

    max_message_size: Annotated[
        int,
        Field(
            description=(
                "Maximum byte length accepted from a frame length prefix.\n"
                "Also bounds how much a FrameDecoder will buffer for one frame."
            ),
            default=256 * 1024 * 1024,
            gt=0,
            le=0xFFFFFFFF
        )
    ]

    trailing: Annotated[
        TrailingPolicy,
        Field(
            description=(
                "Policy for payload bytes left unread after decoding a frame.\n"
                "'reject' fails with TrailingGarbage, 'warn' logs and ignores them."
            ),
            default=TrailingPolicy.REJECT
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Root logging level applied when the settings are loaded.",
            default="INFO"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        configfile = get_configfile()
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)
        return sources

    def to_codec_config(self) -> CodecConfig:
        return CodecConfig(
            max_sequence_length=self.max_sequence_length,
            max_message_size=self.max_message_size,
            trailing=self.trailing,
        )

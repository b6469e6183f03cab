"""
Configurações do anel de progresso
"""
import logging
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings

from circleprogress.core.errors import SettingsError

logger = logging.getLogger('CircleProgress.Settings')

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class AppConfig(BaseModel):
    name: str = "Circle Progress"
    version: str = "0.1.0"
    log_level: str = "INFO"


class RingConfig(BaseModel):
    thickness: int = 20
    step: float = 5.0
    dot_inset: int = 8
    initial_progress: float = 0.0
    frame_interval_ms: int = 16
    size: int = 200


class ColorsConfig(BaseModel):
    background: str = "#E0E0E0"
    progress: str = "#3F51B5"
    dot: str = "#FFFFFF"

    @field_validator("background", "progress", "dot")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        value = value.strip()
        if not _HEX_COLOR.match(value):
            raise ValueError(f"cor deve ser #RRGGBB ou #AARRGGBB: {value!r}")
        return value

    def for_role(self, role: str) -> str:
        return getattr(self, role)


class Settings(BaseSettings):
    app: AppConfig = AppConfig()
    ring: RingConfig = RingConfig()
    colors: ColorsConfig = ColorsConfig()

    class Config:
        env_prefix = "CIRCLEPROGRESS_"
        env_nested_delimiter = "__"

    @classmethod
    def from_yaml(cls, yaml_path: str = "config/settings.yaml"):
        """Carrega configurações do arquivo YAML"""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            logger.warning(f"Arquivo de configuração não encontrado: {yaml_path}")
            return cls()

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(yaml_path, e) from e

        if data is not None and not isinstance(data, dict):
            raise SettingsError(yaml_path, "raiz do YAML deve ser um mapeamento")

        try:
            return cls(**data) if data else cls()
        except ValidationError as e:
            raise SettingsError(yaml_path, e) from e

    def save_yaml(self, yaml_path: str = "config/settings.yaml"):
        """Salva configurações atuais no arquivo YAML."""
        yaml_path_obj = Path(yaml_path)
        yaml_path_obj.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump()
        with open(yaml_path_obj, 'w', encoding='utf-8') as f:
            yaml.safe_dump(
                data,
                f,
                allow_unicode=True,
                sort_keys=False,
                default_flow_style=False
            )


def reload_settings(yaml_path: str = "config/settings.yaml") -> Settings:
    """Recarrega a instância global de configurações a partir do YAML."""
    global settings
    settings = Settings.from_yaml(yaml_path)
    return settings

# Instância global
settings = Settings.from_yaml()

"""
Configurações do Productivity Hub.
Carrega variáveis de ambiente e define configurações globais.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Configurações da aplicação carregadas do ambiente."""

    # Aplicação
    app_name: str = "Productivity Hub"
    app_version: str = "1.0.0"
    api_version: str = "1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_rate_limit_per_second: float = 5  # 0 desativa o throttling de logs
    environment: str = "development"

    # Paginação
    default_page_size: int = 20
    max_page_size: int = 100

    # Sessões
    session_max_age_days: int = 30
    auth_storage_key: str = Field(
        default="productivity_hub_auth",
        description="Chave do documento com todas as sessões ativas"
    )
    legacy_mail_session_key: str = "mail_session"
    legacy_task_session_key: str = "task_session"
    legacy_oauth_session_key: str = "oauth_session"

    # Storage local
    legacy_store_path: str = Field(
        default="data/legacy_storage.json",
        description="Arquivo JSON com as sessões no formato antigo"
    )
    auth_store_path: str = Field(
        default="data/auth_storage.json",
        description="Arquivo JSON usado pelo AuthManager"
    )

    # Security headers
    csp_custom_sources: list[str] = [
        "https://apis.google.com",
        "https://accounts.google.com",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """Indica se está rodando em ambiente de desenvolvimento."""
        return self.environment.lower() == "development"

    @property
    def legacy_session_keys(self) -> dict[str, str]:
        """Retorna as chaves legadas indexadas por provider."""
        return {
            "mail": self.legacy_mail_session_key,
            "task": self.legacy_task_session_key,
            "oauth": self.legacy_oauth_session_key,
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.
    Use esta função para obter as configurações em qualquer lugar da aplicação.
    """
    return Settings()


# Instância global para imports diretos
settings = get_settings()

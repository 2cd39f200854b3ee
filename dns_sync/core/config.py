"""
Configuracion central del job de sincronizacion.
Gestiona variables de entorno de las tres bases de datos (DNS, Stock y Store)
y los parametros de ejecucion.

Cada base se puede especificar con una URL completa (DB_*_URL) o por
componentes (servidor, puerto, usuario, password, nombre).
"""
import re
from dataclasses import dataclass
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings


_SQL_OBJECT_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*){0,2}$")


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Configuracion de conexion para una base de datos.
    Se entrega explicitamente a cada engine/repositorio.
    """

    name: str
    url: str
    echo: bool = False


class Settings(BaseSettings):
    """
    Clase de configuracion del job.
    Lee variables de entorno (y .env) y proporciona valores por defecto.
    """

    APP_NAME: str = Field(default="DNS Sync")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)

    # Base origen DNS (SQL Server)
    DB_DNS_SERVER: str = Field(default="localhost")
    DB_DNS_PORT: int = Field(default=1433)
    DB_DNS_USER: str = Field(default="")
    DB_DNS_PASSWORD: str = Field(default="")
    DB_DNS_NAME: str = Field(default="MAZKO")
    DB_DNS_DRIVER: str = Field(default="ODBC Driver 18 for SQL Server")
    DB_DNS_ENCRYPT: bool = Field(default=False)
    DB_DNS_TRUST_SERVER_CERTIFICATE: bool = Field(default=True)
    DB_DNS_URL: str = Field(default="")

    # Base destino de inventario (MySQL)
    DB_STOCK_SERVER: str = Field(default="localhost")
    DB_STOCK_PORT: int = Field(default=3306)
    DB_STOCK_USER: str = Field(default="")
    DB_STOCK_PASSWORD: str = Field(default="")
    DB_STOCK_NAME: str = Field(default="load_mazko")
    DB_STOCK_URL: str = Field(default="")

    # Base destino de la tienda (MySQL)
    DB_STORE_SERVER: str = Field(default="localhost")
    DB_STORE_PORT: int = Field(default=3306)
    DB_STORE_USER: str = Field(default="")
    DB_STORE_PASSWORD: str = Field(default="")
    DB_STORE_NAME: str = Field(default="store_mazko")
    DB_STORE_URL: str = Field(default="")

    # Vistas y tablas involucradas
    DNS_ACCESSORIES_VIEW: str = Field(default="MAZKO.dbo.v_accesorios_stock")
    DNS_MAINTENANCES_VIEW: str = Field(default="MAZKO.dbo.v_tall_crmv_planes_mantenimiento")
    STOCK_PRODUCTS_TABLE: str = Field(default="load_mazko.wp_wc_product_meta_lookup")
    STORE_MAINTENANCES_TABLE: str = Field(default="store_mazko.mantenimiento")

    # Comportamiento del proceso
    # True reproduce el comportamiento historico: exit code 0 siempre.
    SYNC_ALWAYS_EXIT_ZERO: bool = Field(default=False)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/dns_sync.log")

    @field_validator(
        "DNS_ACCESSORIES_VIEW",
        "DNS_MAINTENANCES_VIEW",
        "STOCK_PRODUCTS_TABLE",
        "STORE_MAINTENANCES_TABLE",
    )
    @classmethod
    def _validate_object_name(cls, value: str) -> str:
        """Los nombres se interpolan en SQL: solo identificadores con puntos."""
        if not _SQL_OBJECT_NAME.match(value):
            raise ValueError(f"Nombre de objeto SQL invalido: {value!r}")
        return value

    @computed_field
    @property
    def effective_dns_url(self) -> str:
        """
        URL efectiva de la base DNS.
        Si DB_DNS_URL esta definida se usa tal cual; si no, se construye
        desde los componentes con el driver ODBC configurado.
        """
        if self.DB_DNS_URL:
            return self.DB_DNS_URL
        query = (
            f"driver={quote_plus(self.DB_DNS_DRIVER)}"
            f"&Encrypt={'yes' if self.DB_DNS_ENCRYPT else 'no'}"
            f"&TrustServerCertificate={'yes' if self.DB_DNS_TRUST_SERVER_CERTIFICATE else 'no'}"
        )
        return (
            f"mssql+aioodbc://{quote_plus(self.DB_DNS_USER)}:{quote_plus(self.DB_DNS_PASSWORD)}"
            f"@{self.DB_DNS_SERVER}:{self.DB_DNS_PORT}/{self.DB_DNS_NAME}?{query}"
        )

    @computed_field
    @property
    def effective_stock_url(self) -> str:
        """URL efectiva de la base Stock."""
        if self.DB_STOCK_URL:
            return self.DB_STOCK_URL
        return _mysql_url(
            self.DB_STOCK_USER,
            self.DB_STOCK_PASSWORD,
            self.DB_STOCK_SERVER,
            self.DB_STOCK_PORT,
            self.DB_STOCK_NAME,
        )

    @computed_field
    @property
    def effective_store_url(self) -> str:
        """URL efectiva de la base Store."""
        if self.DB_STORE_URL:
            return self.DB_STORE_URL
        return _mysql_url(
            self.DB_STORE_USER,
            self.DB_STORE_PASSWORD,
            self.DB_STORE_SERVER,
            self.DB_STORE_PORT,
            self.DB_STORE_NAME,
        )

    def dns_config(self) -> DatabaseConfig:
        return DatabaseConfig(name="dns", url=self.effective_dns_url, echo=self.DEBUG)

    def stock_config(self) -> DatabaseConfig:
        return DatabaseConfig(name="stock", url=self.effective_stock_url, echo=self.DEBUG)

    def store_config(self) -> DatabaseConfig:
        return DatabaseConfig(name="store", url=self.effective_store_url, echo=self.DEBUG)

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def _mysql_url(user: str, password: str, host: str, port: int, database: str) -> str:
    return (
        f"mysql+aiomysql://{quote_plus(user)}:{quote_plus(password)}"
        f"@{host}:{port}/{database}?charset=utf8mb4"
    )


def get_settings() -> Settings:
    """Construye la configuracion leyendo el entorno actual."""
    return Settings()

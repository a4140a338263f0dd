import os
from typing import Callable

from pydantic import SecretStr


class Config:

    log_level: str
    verbose: bool
    web_timeout_s: int
    website_url: str
    parent_organization: str
    version: str

    db_url: SecretStr

    def __init__(
        self,
        def_log_level: str = "info",
        def_verbose: bool = False,
        def_web_timeout_s: int = 10,
        def_website_url: str = "https://example.org/sponsors",
        def_parent_organization: str = "Sponsor Directory",
        def_version: str = "dev",

        def_db_user: SecretStr = SecretStr("root"),
        def_db_pass: SecretStr = SecretStr("root"),
        def_db_host: SecretStr = SecretStr("localhost"),
        def_db_name: SecretStr = SecretStr("sponsors"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.verbose = self.__env("VERBOSE", lambda: str(def_verbose)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.website_url = self.__env("WEBSITE_URL", lambda: def_website_url)
        self.parent_organization = self.__env("PARENT_ORGANIZATION", lambda: def_parent_organization)
        self.version = self.__env("VERSION", lambda: def_version)

        self.__set_up_db(def_db_user, def_db_pass, def_db_host, def_db_name)
        # @formatter:on

    def __set_up_db(self, def_db_user: SecretStr, def_db_pass: SecretStr, def_db_host: SecretStr, def_db_name: SecretStr):
        db_user = self.__senv("POSTGRES_USER", lambda: def_db_user).get_secret_value()
        db_pass = self.__senv("POSTGRES_PASS", lambda: def_db_pass).get_secret_value()
        db_host = self.__senv("POSTGRES_HOST", lambda: def_db_host).get_secret_value()
        db_name = self.__senv("POSTGRES_DB", lambda: def_db_name).get_secret_value()
        db_port = 5432  # standard for postgres
        self.db_url = SecretStr(f"postgresql://{db_user}:{db_pass}@{db_host}:{db_port}/{db_name}")

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()

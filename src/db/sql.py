import time
from typing import Generator

from pydantic import SecretStr
from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from db.model.base import BaseModel
from util import log
from util.config import config
from util.error_codes import DB_CONNECTION_FAILED
from util.errors import ConfigurationError

engine: Engine
LocalSession: sessionmaker


def initialize_db(
    db_url: str | SecretStr = config.db_url,
    multi_connection_setup: bool = True,
    max_retries: int = 7,
    retry_interval_s: int = 5,
) -> tuple[Engine, sessionmaker]:
    global engine, LocalSession
    if isinstance(db_url, SecretStr):
        db_url = db_url.get_secret_value()
    engine = __create_db_engine(
        db_url,
        max_retries = max_retries,
        retry_interval_s = retry_interval_s,
        multi_connection_setup = multi_connection_setup,
    )
    # noinspection PyPep8Naming
    LocalSession = sessionmaker(autocommit = False, autoflush = False, bind = engine)
    BaseModel.metadata.create_all(bind = engine)
    return engine, LocalSession


def __create_db_engine(
    db_url: str,
    max_retries: int,
    retry_interval_s: int,
    multi_connection_setup: bool,
) -> Engine:
    retries = 0
    while retries < max_retries:
        try:
            if multi_connection_setup:
                created_engine = create_engine(
                    url = db_url,          # where the DB is at
                    pool_pre_ping = True,  # check connections before using them
                    pool_recycle = 300,    # recycle connections after 5 minutes
                    pool_size = 3,         # start with a modest pool size
                    max_overflow = 10,     # allow more connections as requirements grow
                    pool_timeout = 10,     # wait for a few seconds for available connections
                )
            else:
                created_engine = create_engine(db_url)
            with created_engine.connect():
                log.d("Database connected")
                return created_engine
        except OperationalError as e:
            retries += 1
            log.w(f"Database connection attempt {retries} failed. Retrying in {retry_interval_s} seconds...", e)
            time.sleep(retry_interval_s)
    raise ConfigurationError(f"Failed to connect to the database after {max_retries} attempts", DB_CONNECTION_FAILED)


# noinspection PyPep8Naming,PyShadowingNames
def get_session() -> Generator[Session, None, None]:
    db = LocalSession()
    try:
        yield db
    finally:
        db.close()

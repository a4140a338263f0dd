import multiprocessing
import os
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.responses import RedirectResponse

from api.model.sponsor_payload import SponsorPayload, SponsorUpdatePayload
from db.sql import get_session, initialize_db
from di.di import DI
from util import log
from util.config import config
from util.errors import ServiceError


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(owner: FastAPI):
    process_name = multiprocessing.current_process().name
    worker_type = "main" if process_name == "MainProcess" else "worker"
    worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
    log.i(f"Lifecycle: Starting up {worker_info}")
    initialize_db()
    yield  # this holds the app alive until the server is shut down
    log.i(f"Lifecycle: Shutting down {worker_info}...")


app = FastAPI(
    docs_url = None,
    redoc_url = None,
    title = f"{config.parent_organization} API",
    description = "This is the API service for the sponsor directory.",
    debug = config.log_level in ["local", "trace", "debug"],
    lifespan = lifespan,
)

# noinspection PyTypeChecker
app.add_middleware(
    CORSMiddleware,
    allow_origins = ["*"],
    allow_credentials = False,
    allow_methods = ["*"],
    allow_headers = ["*"],
)


# noinspection PyUnusedLocal
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, error: ServiceError) -> JSONResponse:
    log.w(f"Request to '{request.url.path}' failed", error)
    return JSONResponse(status_code = error.http_status, content = {"reason": error.to_api_dict()})


@app.get("/")
def root() -> RedirectResponse:
    return RedirectResponse(url = config.website_url)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": config.version}


@app.get("/sponsors")
def get_all_sponsors(db = Depends(get_session)) -> dict:
    try:
        log.d("Fetching all sponsors")
        return DI(db).sponsors_controller.fetch_all_sponsors()
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to get sponsors", e)})


@app.post("/sponsors")
def create_sponsor(payload: SponsorPayload, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Creating sponsor '{payload.sponsor_name}'")
        return DI(db).sponsors_controller.create_sponsor(payload)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to create sponsor", e)})


@app.get("/sponsors/name/{sponsor_name}")
def get_sponsor_by_name(sponsor_name: str, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Fetching sponsor '{sponsor_name}'")
        return DI(db).sponsors_controller.fetch_sponsor_by_name(sponsor_name)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to get sponsor", e)})


@app.put("/sponsors/name/{sponsor_name}")
def update_sponsor(sponsor_name: str, payload: SponsorUpdatePayload, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Updating sponsor '{sponsor_name}'")
        return DI(db).sponsors_controller.update_sponsor(sponsor_name, payload)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to update sponsor", e)})


@app.delete("/sponsors/name/{sponsor_name}")
def delete_sponsor(sponsor_name: str, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Deleting sponsor '{sponsor_name}'")
        return DI(db).sponsors_controller.delete_sponsor(sponsor_name)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to delete sponsor", e)})


@app.get("/sponsors/duration/{coop_duration}")
def get_sponsors_by_coop_duration(coop_duration: str, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Fetching sponsors with coop duration '{coop_duration}'")
        return DI(db).sponsors_controller.fetch_sponsors_by_coop_duration(coop_duration)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to get sponsors", e)})


@app.get("/sponsors/class/{sponsor_class}")
def get_sponsors_by_class(sponsor_class: str, db = Depends(get_session)) -> dict:
    try:
        log.d(f"Fetching sponsors with class '{sponsor_class}'")
        return DI(db).sponsors_controller.fetch_sponsors_by_class(sponsor_class)
    except ServiceError:
        raise
    except Exception as e:
        raise HTTPException(status_code = 500, detail = {"reason": log.e("Failed to get sponsors", e)})


# The main runner
if __name__ == "__main__":
    if "--dev" in sys.argv:  # when running locally...
        os.environ["LOG_LEVEL"] = "debug"
        config.log_level = "debug"
        workers = 1
        reload = True
        print("INFO:     Launching in dev mode...")
    else:  # when running in production...
        workers = 2
        reload = False
        # and run the database migrations
        print("INFO:     Running database migrations...")
        subprocess.run(["alembic", "upgrade", "head"], check = True)
        print("INFO:     Launching in production mode...")
    uvicorn_log_level = "debug" if config.log_level == "local" else config.log_level

    # get the service version
    if (version_file := Path("./.version")).exists():
        version_name = version_file.read_text().strip()
        if version_name:
            os.environ["VERSION"] = version_name
            config.version = version_name
            print("INFO:     Version file found", f"v{config.version}")
        else:
            print("ERROR:    Version file empty", file = sys.stderr)
    else:
        print("ERROR:    Version file not found, using dev version", file = sys.stderr)

    # finally, start the server
    uvicorn.run(
        "main:app",
        host = "0.0.0.0",
        port = 80,
        log_level = uvicorn_log_level,
        workers = workers,
        reload = reload,
    )

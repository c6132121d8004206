#!/usr/bin/env python3
import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import auth, members, reports
from .utils.database import create_all


log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=log_level, format="%(asctime)s - %(levelname)s - %(message)s")

app = FastAPI(title="Team Report Admin API", version=os.getenv("APP_VERSION", "1.0.0"))

# CORS (configurable)
if os.getenv("ENABLE_CORS", "false").lower() == "true":
    origins_env = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    # Liste d'origines séparées par des virgules
    allow_origins = [o.strip() for o in origins_env.split(",") if o.strip()] or ["*"]
    allow_credentials = os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"
    # Les navigateurs refusent '*' avec credentials=true
    if "*" in allow_origins and allow_credentials:
        logging.warning(
            "CORS: '*' avec credentials=true n'est pas supporté par les navigateurs; credentials sera forcé à false."
        )
        allow_credentials = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(auth.router, prefix="/auth", tags=["auth"])  # /auth/login
app.include_router(members.router, prefix="/members", tags=["members"])
app.include_router(reports.router, prefix="/reports", tags=["reports"])  # admin


@app.on_event("startup")
def on_startup():
    if os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true":
        create_all(None)
        logging.info("Tables vérifiées/créées")


@app.get("/health")
async def health():
    return {"status": "ok"}

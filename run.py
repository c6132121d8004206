#!/usr/bin/env python3
import os
import logging

import uvicorn


def main():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))
    reload = os.getenv("APP_RELOAD", "false").lower() == "true"

    logging.info(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()

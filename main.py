"""Public URL surface: serves uploaded images and the placeholder image."""
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import config
import models
from database import engine
from logging_config import setup_logging
from storage import UPLOADS_PREFIX

setup_logging()

app = FastAPI()
models.Base.metadata.create_all(bind=engine)

os.makedirs(os.path.join(config.PUBLIC_DIR, UPLOADS_PREFIX), exist_ok=True)
app.mount("/uploads",
          StaticFiles(directory=os.path.join(config.PUBLIC_DIR, UPLOADS_PREFIX)),
          name="uploads")
app.mount("/img",
          StaticFiles(directory=os.path.join(config.PUBLIC_DIR, "img"), check_dir=False),
          name="img")


@app.get("/health")
async def health():
    """Report that the app is up"""
    return {"status": "healthy"}

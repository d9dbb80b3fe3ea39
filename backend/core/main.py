from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi_injector import attach_injector

from api import router

from .di import create_injector
from .log_config import setup_logging
from .settings import settings

load_dotenv()
setup_logging(dev_mode=not settings.log_json)
app = FastAPI(title="Movistore Content API")

injector = create_injector()
attach_injector(app, injector)
app.include_router(router)


@app.get("/health")
def health_check():
    return {"status": "ok"}

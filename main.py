# main.py
import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bonuscalc.core.config import settings
from bonuscalc.core.database import engine, Base

from bonuscalc.api.calculator import router as calculator_router
from bonuscalc.api.settings import router as settings_router

from bonuscalc.web.calculator import router as web_router

# чтобы SQLAlchemy увидел модели
import bonuscalc.models  # noqa: F401

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Bonus Scheme Calculator")

# -------------------------
# DB init
# -------------------------
Base.metadata.create_all(bind=engine)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # input не отдаём: Infinity/NaN из тела не сериализуются в JSON
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


app.include_router(calculator_router, prefix="/api")
app.include_router(settings_router, prefix="/api")

app.include_router(web_router)


@app.get("/health")
def health():
    return {"status": "ok"}

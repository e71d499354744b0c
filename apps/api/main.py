from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from aiogram.types import Update
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from timecalc.config import settings
from timecalc.errors import CalcError
from timecalc.logging_config import setup_logging
from timecalc.models import Duration, Operation
from timecalc.presentation import (
    day_boundary_label,
    diff_label,
    long_date_label,
    offset_label,
    time_12h,
    time_24h,
)
from timecalc.services.converter import convert_text
from timecalc.services.diff import day_count
from timecalc.services.parser import parse_date
from timecalc.services.shift import shift
from timecalc.telegram.bot import create_bot, create_dispatcher
from timecalc.telegram.handlers import router
from timecalc.zones import SUPPORTED_ZONES, database_for

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

bot = create_bot()
dp = create_dispatcher()
dp.include_router(router)
polling_task: asyncio.Task | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global polling_task
    if bot is None:
        logger.info("TELEGRAM_BOT_TOKEN not set, chat bot disabled")
    elif settings.public_base_url:
        await bot.set_webhook(
            url=f"{settings.public_base_url}/webhook",
            secret_token=settings.webhook_secret,
        )
    else:
        # Polling mode for local/dev when no public URL is configured.
        await bot.delete_webhook(drop_pending_updates=True)
        polling_task = asyncio.create_task(dp.start_polling(bot))
    yield
    if polling_task:
        polling_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await polling_task


app = FastAPI(title=settings.app_name, lifespan=lifespan)


@app.exception_handler(CalcError)
async def calc_error_handler(request: Request, exc: CalcError):
    logger.info("Rejected %s %s: %s", request.url.path, exc.kind.value, exc)
    return JSONResponse(status_code=422, content={"error": exc.kind.value, "detail": str(exc)})


@app.get("/diff")
async def diff(start: str, end: str):
    start_date = parse_date(start, settings.date_layout)
    end_date = parse_date(end, settings.date_layout)
    days = day_count(start_date, end_date)
    return {"start": str(start_date), "end": str(end_date), "days": days, "label": diff_label(days)}


@app.get("/shift")
async def shift_date(
    start: str,
    operation: Operation = Operation.ADD,
    years: int = Query(default=0, ge=0),
    months: int = Query(default=0, ge=0),
    weeks: int = Query(default=0, ge=0),
    days: int = Query(default=0, ge=0),
):
    start_date = parse_date(start, settings.date_layout)
    duration = Duration(years=years, months=months, weeks=weeks, days=days)
    result = shift(start_date, duration, operation)
    return {"start": str(start_date), "result": str(result), "label": long_date_label(result)}


@app.get("/convert")
async def convert(
    date: str,
    time: str,
    source: str = settings.default_source_zone,
    target: str = settings.default_target_zone,
):
    result = convert_text(
        date, time, source, target, db=database_for(settings.restrict_to_catalog), layout=settings.date_layout
    )
    return {
        "source_zone": result.source_zone,
        "target_zone": result.target_zone,
        "target_date": str(result.target_date),
        "time_24h": time_24h(result.target_time),
        "time_12h": time_12h(result.target_time),
        "source_offset_minutes": result.source_offset_minutes,
        "target_offset_minutes": result.target_offset_minutes,
        "offset_delta_hours": float(result.offset_delta_hours),
        "offset_label": offset_label(result.offset_delta_hours),
        "same_day": result.same_day,
        "day_label": day_boundary_label(result),
    }


@app.get("/zones")
async def zones():
    return [
        {"zone_id": entry.zone_id, "label": entry.label, "country": entry.country}
        for entry in SUPPORTED_ZONES
    ]


@app.post("/webhook")
async def webhook(request: Request):
    if bot is None:
        raise HTTPException(status_code=404, detail="Chat bot disabled")
    if settings.webhook_secret:
        secret = request.headers.get("X-Telegram-Bot-Api-Secret-Token")
        if secret != settings.webhook_secret:
            raise HTTPException(status_code=403, detail="Invalid secret token")

    update = Update.model_validate(await request.json())
    await dp.feed_update(bot, update)
    return {"ok": True}


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}

"""Countdown to a house's Christmas, as a snapshot or a live stream."""

import asyncio
from typing import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse
from loguru import logger

from letterhouse.core.config import get_settings
from letterhouse.core.countdown import CountdownTicker
from letterhouse.core.database import House
from letterhouse.core.dependencies import get_service
from letterhouse.core.errors import ServiceError
from letterhouse.core.services import HouseService, build_countdown
from letterhouse.schemas.countdown import CountdownResponse

router = APIRouter()


@router.get("/{house_id}/countdown", response_model=CountdownResponse)
async def get_countdown(
    house_id: str,
    house_service: HouseService = Depends(get_service(HouseService)),
):
    try:
        return await house_service.countdown(house_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{house_id}/countdown/stream")
async def stream_countdown(
    house_id: str,
    request: Request,
    house_service: HouseService = Depends(get_service(HouseService)),
):
    """Server-sent events, one ``countdown`` event per tick."""
    try:
        house = await house_service.get_house(house_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    interval = get_settings().countdown_interval
    return StreamingResponse(
        countdown_events(house, request, interval),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )


async def countdown_events(
    house: House, request: Request, interval: float = 1.0
) -> AsyncIterator[str]:
    """Yield SSE frames until the client goes away."""
    queue: asyncio.Queue = asyncio.Queue()
    ticker = CountdownTicker(house.timezone, queue.put, interval)
    await ticker.start()
    logger.debug(f"Countdown stream opened for house {house.id}")
    try:
        while True:
            countdown = await queue.get()
            payload = build_countdown(house, countdown).model_dump_json()
            yield f"event: countdown\ndata: {payload}\n\n"
            if await request.is_disconnected():
                break
    finally:
        await ticker.stop()
        logger.debug(f"Countdown stream closed for house {house.id}")

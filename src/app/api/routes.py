from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field
from ..core.engine import get_engine
from ..core.logging import redact
from ..core.config import settings
import logging
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from typing import Optional


router = APIRouter()


REQ_COUNTER = Counter('api_requests_total', 'Total API requests', ['endpoint'])
LATENCY = Histogram('api_latency_seconds', 'Request latency', ['endpoint'])


logger = logging.getLogger(__name__)


def _required(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise HTTPException(status_code=400, detail=f'"{field}" is required')
    return value


class ChatRequest(BaseModel):
    message: Optional[str] = Field(None, description='Free-text question about the drones')


class ChatResponse(BaseModel):
    response: str
    tier: str


@router.post('/chat', response_model=ChatResponse)
def chat(payload: ChatRequest):
    REQ_COUNTER.labels(endpoint='chat').inc()
    with LATENCY.labels(endpoint='chat').time():
        message = _required(payload.message, 'message')
        if settings.LOG_USER_MESSAGES:
            logger.debug('chat message: %s', redact(message))
        resolution = get_engine().router.resolve(message)
        return {'response': resolution.text, 'tier': resolution.tier}


class CompareRequest(BaseModel):
    drone1: Optional[str] = Field(None, description='Text containing the first drone name')
    drone2: Optional[str] = Field(None, description='Text containing the second drone name')


@router.post('/compare')
def compare(payload: CompareRequest):
    REQ_COUNTER.labels(endpoint='compare').inc()
    with LATENCY.labels(endpoint='compare').time():
        drone1 = _required(payload.drone1, 'drone1')
        drone2 = _required(payload.drone2, 'drone2')
        return {'comparison': get_engine().compare(drone1, drone2)}


@router.get('/drones')
async def drones():
    REQ_COUNTER.labels(endpoint='drones').inc()
    with LATENCY.labels(endpoint='drones').time():
        return [entry.to_dict() for entry in get_engine().catalog]


@router.get('/metrics')
async def metrics():
    data = generate_latest()
    return PlainTextResponse(data.decode('utf-8'), media_type=CONTENT_TYPE_LATEST)


@router.get('/healthz')
async def healthz():
    """Basic health check for liveness/readiness."""
    try:
        engine = get_engine()
        drone_count = len(engine.catalog)
        keyword_count = len(engine.keywords)
        status = 'ok'
    except Exception:
        logger.exception('engine failed to load')
        drone_count = keyword_count = 0
        status = 'error'
    return {
        'status': status,
        'drones': drone_count,
        'keywords': keyword_count,
        'version': 'v1',
    }

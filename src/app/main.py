from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .api.routes import router
from .core.engine import get_engine
from .core.logging import configure_logging
import time
import logging



log = configure_logging()


app = FastAPI(title='Drone Catalog Chat Service', version='0.1.0')

@app.get("/")
def root():
    return {"message": "API is running"}


@app.middleware('http')
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = (time.time() - start) * 1000
    log.info(f"{request.method} {request.url.path} {response.status_code} {duration:.1f}ms")
    return response


@app.exception_handler(RequestValidationError)
async def bad_request(request: Request, exc: RequestValidationError):
    # Malformed bodies are client errors (400), not FastAPI's default 422
    return JSONResponse(status_code=400, content={'detail': 'invalid request body'})


@app.on_event('startup')
async def startup_event():
    engine = get_engine()
    logging.getLogger(__name__).info('Service started with %d drones', len(engine.catalog))


app.include_router(router)

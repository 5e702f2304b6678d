# Role: FastAPI app bootstrap. Loads environment config early, registers routers and error mapping,
# and exposes health/docs endpoints.

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import fitcoach.config
fitcoach.config.load_env()

from fitcoach.api.chat import router as chat_router
from fitcoach.api.state import router as state_router
from fitcoach.core.errors import RelayError

app = FastAPI(title="Fitness Coach Relay API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(chat_router)
app.include_router(state_router)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    # Key line: every client-visible failure is {"error": ...} with the error's own status.
    if fitcoach.config.DEBUG:
        print(f"[{request.url.path}] {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Key line: malformed bodies share the {"error": ...} shape; a bad message is the same 400 as a missing one.
    errors = exc.errors()
    if fitcoach.config.DEBUG:
        print(f"[{request.url.path}] RequestValidationError: {errors}")

    fields = sorted(
        {err["loc"][1] for err in errors if len(err.get("loc", ())) > 1 and isinstance(err["loc"][1], str)}
    )
    if "message" in fields:
        message = "Message is required"
    else:
        message = f"Invalid request body: {', '.join(fields)}" if fields else "Invalid request body"
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "Fitness Coach Relay API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}

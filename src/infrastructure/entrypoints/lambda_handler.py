"""
AWS Lambda entry point: cloud deployment behind API Gateway.

Mangum translates API Gateway / Function URL events into ASGI requests for the
FastAPI app defined in fastapi_app.py, so routing, CORS and error mapping are
identical to a local uvicorn run. The lifespan protocol is unused.

Deploy with the handler string:
    src.infrastructure.entrypoints.lambda_handler.handler
"""

from mangum import Mangum

from src.infrastructure.entrypoints.fastapi_app import app

handler = Mangum(app, lifespan="off")

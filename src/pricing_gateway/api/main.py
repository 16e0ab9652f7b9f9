import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from pricing_gateway import __version__
from pricing_gateway.config.settings import Settings, get_settings
from pricing_gateway.engine import FlowEngine, PricingEngine
from pricing_gateway.errors import AssetMissingError, ClientInputError
from pricing_gateway.services.decision_client import DecisionRulesClient, RuleEvaluator
from pricing_gateway.utils.logging_config import setup_logging
from pricing_gateway.api.routes import router


logger = logging.getLogger(__name__)


async def client_input_error_handler(request: Request, exc: ClientInputError):
    return PlainTextResponse(str(exc), status_code=400)


async def asset_missing_error_handler(request: Request, exc: AssetMissingError):
    logger.error("Missing %s", exc.path)
    return PlainTextResponse("HTML file not found", status_code=500)


def create_app(settings: Optional[Settings] = None, evaluator: Optional[RuleEvaluator] = None) -> FastAPI:
    """
    Build the gateway application.

    Settings are read once here and handed to the engines. Without an
    explicit evaluator a DecisionRules client is created and closed on
    shutdown.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    owned_client = None
    if evaluator is None:
        owned_client = DecisionRulesClient(settings)
        evaluator = owned_client

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Pricing gateway ready (DecisionRules host: %s)", settings.decision_rules_host)
        yield
        if owned_client is not None:
            await owned_client.aclose()

    app = FastAPI(
        title="Pricing Gateway",
        description="Forwards part records to DecisionRules and returns pricing results",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.pricing_engine = PricingEngine(evaluator, settings)
    app.state.flow_engine = FlowEngine(evaluator, settings)

    app.add_exception_handler(ClientInputError, client_input_error_handler)
    app.add_exception_handler(AssetMissingError, asset_missing_error_handler)

    app.include_router(router)
    return app


app = create_app()

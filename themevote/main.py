import asyncio
import logging
import os

from aiohttp import web
from dotenv import load_dotenv

from .application.bootstrap import bootstrap_app
from .application.container import ServerConfig
from .application.metrics import configure_metrics_logger
from .application.web import create_web_app
from .infrastructure.auth import DEFAULT_ALGORITHMS, jwks_url_for
from .infrastructure.metrics import metrics

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def load_server_config() -> ServerConfig:
    jwks_url = os.getenv("JWKS_URL", "").strip()
    if not jwks_url:
        provider_url = os.getenv("SUPABASE_URL", "").strip()
        if not provider_url:
            raise RuntimeError("Set SUPABASE_URL or JWKS_URL. Put it to .env")
        jwks_url = jwks_url_for(provider_url)
    algorithms = tuple(
        alg.strip()
        for alg in os.getenv("JWT_ALGORITHMS", "").split(",")
        if alg.strip()
    ) or DEFAULT_ALGORITHMS
    config = ServerConfig(
        db_path=os.getenv("DB_PATH", "themes.db"),
        jwks_url=jwks_url,
        jwt_audience=os.getenv("JWT_AUDIENCE", "").strip() or None,
        jwt_algorithms=algorithms,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        metrics_log_path=os.getenv("METRICS_LOG_PATH", "").strip() or None,
    )
    logger.info(
        "Config loaded: db_path=%s, jwks_url=%s, audience=%s, algorithms=%s, listen=%s:%s, metrics=%s",
        config.db_path,
        config.jwks_url,
        config.jwt_audience or "any",
        ",".join(config.jwt_algorithms),
        config.host,
        config.port,
        config.metrics_log_path or "off",
    )
    return config


async def main():
    config = load_server_config()
    if config.metrics_log_path:
        metrics.configure(configure_metrics_logger(config.metrics_log_path))

    logger.info("Bootstrapping application")
    async with bootstrap_app(config) as container:
        runner = web.AppRunner(create_web_app(container))
        await runner.setup()
        site = web.TCPSite(runner, host=config.host, port=config.port)
        await site.start()
        logger.info("Server running on http://%s:%s", config.host, config.port)
        try:
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()
            logger.info("Server stopped")


def run() -> None:
    load_dotenv()
    configure_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user, shutting down")


if __name__ == "__main__":
    run()

"""Xitzin application factory for Wanderer."""

from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine
from xitzin import Xitzin

from .config import Config
from .engine.loader import load_world, resolve_world_path
from .logging import get_logger

logger = get_logger(__name__)


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    app = Xitzin(
        title="Wanderer",
        version="0.1.0",
        templates_dir=Path(__file__).parent / "templates",
    )

    engine = create_engine(config.database_url)
    app.state.engine = engine
    app.state.config = config

    @app.on_startup
    async def startup():
        """Initialize database and load the world."""
        SQLModel.metadata.create_all(engine)
        logger.debug("database_setup_complete")

        world = load_world(resolve_world_path(config.world))
        if config.goal is not None:
            world.find_location(config.goal)
        app.state.world = world
        logger.info(
            "world_loaded",
            world=config.world,
            locations=len(world),
            initial_location=world.initial_location_name,
        )
        logger.info("startup_complete")

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app


def get_session(app: Xitzin) -> Session:
    """Get a database session from the app."""
    return Session(app.state.engine)

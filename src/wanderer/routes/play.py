"""Gameplay routes."""

from contextlib import contextmanager

from sqlmodel import Session
from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..session import WandererSession
from ..users import get_or_create_account


@contextmanager
def _game_session(request: Request):
    """Load the account's game session with auto-close."""
    identity = get_identity(request)
    db_session = Session(request.app.state.engine)
    try:
        account = get_or_create_account(db_session, identity.fingerprint)
        yield WandererSession.load_or_create(
            db_session,
            account,
            request.app.state.world,
            goal_location_name=request.app.state.config.goal,
        )
    finally:
        db_session.close()


def _render_play(app: Xitzin, game: WandererSession, message: str = ""):
    """Render the main play view."""
    location = game.get_location()
    return app.template(
        "play.gmi",
        location=location.name,
        description=location.description,
        exits=game.get_exits(),
        message=message,
        turns=game.game.turn,
        is_finished=game.is_finished,
    )


def _play_action(app: Xitzin, request: Request, description: str):
    with _game_session(request) as game:
        message = game.take_turn(description)
        game.save()
        return _render_play(app, game, message=message)


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        with _game_session(request) as game:
            game.save()
            return _render_play(app, game)

    @app.gemini("/go/{direction}", name="go")
    @require_certificate
    def go(request: Request, direction: str):
        """Move through an exit via clickable link."""
        return _play_action(app, request, f"Move {direction}")

    @app.gemini("/wait", name="wait")
    @require_certificate
    def wait(request: Request):
        """Skip a turn."""
        return _play_action(app, request, "Skip turn")

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        with _game_session(request) as game:
            if query.strip().upper() == "YES":
                game.reset()
                game.save()
                return _render_play(app, game, message="A new journey begins!")
            return Redirect("/play")

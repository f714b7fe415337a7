"""Home, help, and map routes. None of them need a certificate."""

from xitzin import Request, Xitzin


def register_routes(app: Xitzin) -> None:
    """Register home routes."""

    @app.gemini("/", name="home")
    def home(request: Request):
        world = request.app.state.world
        return app.template(
            "home.gmi",
            world_name=request.app.state.config.world,
            location_count=len(world),
            initial_location=world.initial_location_name,
        )

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template("help.gmi")

    @app.gemini("/map", name="map")
    def world_map(request: Request):
        """Every location with its exits, in data order."""
        locations = [
            (location.name, sorted(location.connections.items()))
            for location in request.app.state.world
        ]
        return app.template("map.gmi", locations=locations)

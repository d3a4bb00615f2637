from .charset import charset_bp  # noqa


def register_routes(app, url_prefix: str = '/api/v1'):
    """Register all API blueprints under the API prefix."""
    for bp in (charset_bp,):
        app.register_blueprint(bp, url_prefix=url_prefix)

__all__ = ['register_routes']

"""Views module - exports all blueprints."""
from petclinic.views.pets import pets_blueprint
from petclinic.views.health import health_blueprint

__all__ = ["pets_blueprint", "health_blueprint"]

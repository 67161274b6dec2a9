"""Pet create/edit form views scoped under an owner."""
import logging

from flask import Blueprint, current_app, redirect, render_template, request

from petclinic.application.use_cases.pet_form_handler import PetFormHandler, ViewResult
from petclinic.domain.entities import Pet
from petclinic.middleware.monitoring import track_form_submission, track_request
from petclinic.middleware.tracing import traced

pets_blueprint = Blueprint("pets", __name__, url_prefix="/owners/<int:owner_id>")
_logger = logging.getLogger(__name__)


def _get_handler() -> PetFormHandler:
    container = current_app.config['service_container']
    return container.get_pet_form_handler()


def _respond(result: ViewResult):
    if result.is_redirect:
        return redirect(result.redirect_to)
    return render_template(result.view, **result.model)


@pets_blueprint.route("/pets/new", methods=["GET"])
@track_request("pets_new")
@traced
def init_creation_form(owner_id: int):
    handler = _get_handler()
    owner = handler.load_owner(owner_id)
    return _respond(handler.show_create_form(owner))


@pets_blueprint.route("/pets/new", methods=["POST"])
@track_request("pets_new")
@traced
def process_creation_form(owner_id: int):
    handler = _get_handler()
    owner = handler.bind_owner_input(handler.load_owner(owner_id), request.form)
    pet = Pet()
    form = handler.bind_pet_input(request.form, pet)

    result = handler.submit_create_form(owner, pet, form)
    track_form_submission("create", saved=result.is_redirect)
    if not result.is_redirect:
        _logger.debug(f"Create form for owner {owner_id} redisplayed with errors: {form.errors}")
    return _respond(result)


@pets_blueprint.route("/pets/<int:pet_id>/edit", methods=["GET"])
@track_request("pets_edit")
@traced
def init_update_form(owner_id: int, pet_id: int):
    handler = _get_handler()
    owner = handler.load_owner(owner_id)
    return _respond(handler.show_edit_form(pet_id, owner))


@pets_blueprint.route("/pets/<int:pet_id>/edit", methods=["POST"])
@track_request("pets_edit")
@traced
def process_update_form(owner_id: int, pet_id: int):
    handler = _get_handler()
    owner = handler.bind_owner_input(handler.load_owner(owner_id), request.form)
    pet = handler.load_pet(pet_id)
    form = handler.bind_pet_input(request.form, pet)

    result = handler.submit_edit_form(pet, form, owner)
    track_form_submission("edit", saved=result.is_redirect)
    if not result.is_redirect:
        _logger.debug(f"Edit form for pet {pet_id} redisplayed with errors: {form.errors}")
    return _respond(result)

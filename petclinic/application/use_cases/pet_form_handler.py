"""Use case for the pet create/edit forms of an owner (Use Case Pattern)."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from werkzeug.datastructures import MultiDict

from petclinic.domain.entities import Owner, Pet, PetType
from petclinic.domain.exceptions import OwnerNotFoundError, PetNotFoundError
from petclinic.domain.interfaces.owner_repository import IOwnerRepository
from petclinic.domain.interfaces.pet_repository import IPetRepository
from petclinic.forms import PetForm


logger = logging.getLogger(__name__)

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm.html"

# Owner identity is never bindable from client input
OWNER_BINDABLE_FIELDS = ("first_name", "last_name", "address", "city", "telephone")


@dataclass
class ViewResult:
    """Outcome of a form operation: a view to render, or a redirect."""

    view: Optional[str] = None
    model: Dict[str, Any] = field(default_factory=dict)
    redirect_to: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


class PetFormHandler:
    """
    Handles the pet forms scoped under an owner.

    Binds submitted form data to a pet, validates it, rejects duplicate names
    within the owner and persists through the pet repository. Each operation
    is a single request/response transaction.
    """

    def __init__(self, pets: IPetRepository, owners: IOwnerRepository):
        """
        Initialize handler with repositories (Dependency Injection).

        Args:
            pets: Pet repository
            owners: Owner repository
        """
        self.pets = pets
        self.owners = owners

    def load_pet_types(self) -> List[PetType]:
        """Return all known pet types."""
        return self.pets.find_pet_types()

    def load_owner(self, owner_id: int) -> Owner:
        """
        Fetch an owner by identifier.

        Raises:
            OwnerNotFoundError: If no owner has this identifier
        """
        owner = self.owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFoundError(owner_id)
        return owner

    def load_pet(self, pet_id: int) -> Pet:
        """
        Fetch a pet by identifier.

        Raises:
            PetNotFoundError: If no pet has this identifier
        """
        pet = self.pets.find_by_id(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)
        return pet

    def bind_owner_input(self, owner: Owner, form_data: MultiDict) -> Owner:
        """
        Bind submitted values onto the owner, never its identity.

        Args:
            owner: Owner loaded for the request
            form_data: Submitted form values

        Returns:
            The same owner
        """
        for name in OWNER_BINDABLE_FIELDS:
            if name not in form_data:
                continue
            setattr(owner, name, form_data[name])
        return owner

    def bind_pet_input(self, form_data: MultiDict, pet: Pet) -> PetForm:
        """
        Bind and validate submitted pet values.

        Converted values are copied onto ``pet`` even when validation fails so
        the form can be redisplayed with the user's input.

        Args:
            form_data: Submitted form values
            pet: Pet receiving the values (new, or loaded for editing)

        Returns:
            The validated form holding any field errors
        """
        pet_types = self.load_pet_types()
        form = PetForm(formdata=form_data, is_new=pet.is_new, pet_types=pet_types)
        form.validate()
        form.populate_pet(pet, pet_types)
        return form

    def _form_view(self, owner: Optional[Owner], pet: Pet, form: PetForm) -> ViewResult:
        return ViewResult(
            view=VIEWS_PETS_CREATE_OR_UPDATE_FORM,
            model={
                "owner": owner,
                "pet": pet,
                "form": form,
                "types": self.load_pet_types(),
            },
        )

    @staticmethod
    def _owner_redirect(owner: Owner) -> ViewResult:
        return ViewResult(redirect_to=f"/owners/{owner.id}")

    def show_create_form(self, owner: Owner) -> ViewResult:
        """Prepare an empty pet attached to the owner and show the form."""
        pet = Pet()
        owner.add_pet(pet)
        form = PetForm(formdata=None, is_new=True, pet_types=self.load_pet_types())
        return self._form_view(owner, pet, form)

    def submit_create_form(self, owner: Owner, pet: Pet, form: PetForm) -> ViewResult:
        """
        Save a new pet unless the form has errors or the name is taken.

        Args:
            owner: Owner the pet is created for
            pet: Pet bound from the submitted form
            form: Validated form for the pet

        Returns:
            Redirect to the owner page, or the form view with errors
        """
        if pet.name and pet.is_new and owner.get_pet(pet.name, ignore_new=True) is not None:
            logger.info(f"Rejected duplicate pet name '{pet.name}' for owner {owner.id}")
            form.reject_value("name", "duplicate", "already exists")

        owner.add_pet(pet)
        if form.has_errors():
            return self._form_view(owner, pet, form)

        self.pets.save(pet)
        logger.info(f"Pet {pet.id} created for owner {owner.id}")
        return self._owner_redirect(owner)

    def show_edit_form(self, pet_id: int, owner: Owner) -> ViewResult:
        """
        Load a pet and show the form pre-filled with its values.

        Args:
            pet_id: Pet identifier
            owner: Owner from the request path, the one a submit saves under
        """
        pet = self.load_pet(pet_id)
        form = PetForm(
            formdata=None,
            is_new=False,
            pet_types=self.load_pet_types(),
            name=pet.name,
            birth_date=pet.birth_date,
            type=pet.type.name if pet.type else None,
        )
        return self._form_view(owner, pet, form)

    def submit_edit_form(self, pet: Pet, form: PetForm, owner: Owner) -> ViewResult:
        """
        Save an edited pet unless the form has errors.

        Args:
            pet: Pet bound from the submitted form
            form: Validated form for the pet
            owner: Owner the pet belongs to

        Returns:
            Redirect to the owner page, or the form view with errors
        """
        if form.has_errors():
            pet.owner = owner
            return self._form_view(owner, pet, form)

        owner.add_pet(pet)
        self.pets.save(pet)
        logger.info(f"Pet {pet.id} updated for owner {owner.id}")
        return self._owner_redirect(owner)

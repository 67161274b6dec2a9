from typing import Iterable, Optional

from flask_wtf import FlaskForm
from wtforms import DateField, SelectField, StringField
from wtforms.validators import DataRequired, InputRequired, ValidationError

from .domain.entities import Pet, PetType

REQUIRED = 'is required'


class PetForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(message=REQUIRED)])
    birth_date = DateField('Birth Date', format='%Y-%m-%d', validators=[InputRequired(message=REQUIRED)])
    type = SelectField('Type', coerce=str, validate_choice=False)

    def __init__(self, *args, is_new: bool = True, pet_types: Iterable[PetType] = (), **kwargs):
        super().__init__(*args, **kwargs)
        self.is_new = is_new
        self.error_codes = {}
        self.type.choices = [(pet_type.name, pet_type.name) for pet_type in pet_types]

    def validate_type(self, field):
        # Type may only be omitted when editing an existing pet
        if not field.data:
            if self.is_new:
                raise ValidationError(REQUIRED)
            return
        if field.data not in {value for value, _ in field.choices}:
            raise ValidationError('Not a valid choice.')

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        """Register an error on a field after validation has run."""
        field = self[field_name]
        field.errors = list(field.errors) + [message]
        self.error_codes.setdefault(field_name, []).append(code)

    def has_errors(self) -> bool:
        return any(field.errors for field in self)

    def selected_type(self, pet_types: Iterable[PetType]) -> Optional[PetType]:
        for pet_type in pet_types:
            if pet_type.name == self.type.data:
                return pet_type
        return None

    def populate_pet(self, pet: Pet, pet_types: Iterable[PetType]) -> Pet:
        """Copy the converted form values onto a pet, keeping its type when none was chosen."""
        pet.name = self.name.data
        pet.birth_date = self.birth_date.data
        pet_type = self.selected_type(pet_types)
        if pet_type is not None:
            pet.type = pet_type
        return pet

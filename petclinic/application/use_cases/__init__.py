from petclinic.application.use_cases.pet_form_handler import PetFormHandler, ViewResult

__all__ = ["PetFormHandler", "ViewResult"]

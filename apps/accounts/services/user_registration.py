"""Student registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str = "",
    student_type: str = "",
    program: str = "",
) -> User:
    """
    Register a new student account.

    Args:
        email: Student's email address
        password: Student's password (will be hashed)
        full_name: Optional full name
        student_type: Optional StudentType value
        program: Optional study program, e.g. "M.S. Cybersecurity"

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    extra = {'full_name': full_name, 'program': program}
    if student_type:
        extra['student_type'] = student_type

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                **extra
            )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    logger.info("Registered student %s", user.id)
    return user

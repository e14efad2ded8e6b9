import logging

from backerhub.errors import NotFound, ValidationError
from backerhub.models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository):
        self.repository = repository

    def register_user(self, name, email, password, occupation=None, role='user'):
        email = email.strip().lower()
        if self.repository.find_by_email(email):
            raise ValidationError("Email has been registered")

        user = User(name=name, email=email, occupation=occupation, role=role)
        user.set_password(password)
        self.repository.save(user)
        logger.info(f"Registered user {user.id} <{user.email}>")
        return user

    def login(self, email, password):
        user = self.repository.find_by_email(email.strip().lower())
        if not user:
            raise ValidationError("No user found on that email")
        if not user.check_password(password):
            raise ValidationError("Wrong password")
        return user

    def is_email_available(self, email):
        return self.repository.find_by_email(email.strip().lower()) is None

    def save_avatar(self, user_id, file_location):
        user = self.get_user_by_id(user_id)
        user.avatar_file_name = file_location
        return self.repository.update(user)

    def get_user_by_id(self, user_id):
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFound("No user found with that ID")
        return user

    def get_all_users(self):
        return self.repository.find_all()

    def update_user(self, user_id, name, email, occupation):
        user = self.get_user_by_id(user_id)
        email = email.strip().lower()
        if email != user.email and self.repository.find_by_email(email):
            raise ValidationError("Email has been registered")

        user.name = name
        user.email = email
        user.occupation = occupation
        return self.repository.update(user)

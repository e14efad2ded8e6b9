from backerhub.models import User


class UserRepository:
    def __init__(self, session):
        self.session = session

    def save(self, user):
        self.session.add(user)
        self.session.commit()
        return user

    def update(self, user):
        self.session.commit()
        return user

    def find_by_email(self, email):
        return self.session.query(User).filter_by(email=email).first()

    def find_by_id(self, user_id):
        return self.session.get(User, user_id)

    def find_all(self):
        return self.session.query(User).order_by(User.id).all()

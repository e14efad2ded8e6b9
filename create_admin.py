#!/usr/bin/env python3
"""
Script to create an admin account for the web admin panel, or promote an
existing user to admin.

Usage: python create_admin.py --email admin@example.org --name "Site Admin" --password secret
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin(email, name, password):
    """Creates the admin user, or promotes and re-keys it if the email exists."""
    from database import db
    from backerhub.models import User

    email = email.strip().lower()
    user = db.session.query(User).filter_by(email=email).first()

    if user:
        print(f"  ✓ User {email} already exists, promoting to admin...")
        user.role = 'admin'
        if name:
            user.name = name
    else:
        print(f"  + Creating new admin {email}...")
        user = User(email=email, name=name or email, role='admin')
        db.session.add(user)

    user.set_password(password)

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to save admin {email}: {str(e)}")
        raise
    return user


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create or promote an admin user")
    parser.add_argument('--email', required=True)
    parser.add_argument('--password', required=True)
    parser.add_argument('--name', default=None)
    args = parser.parse_args(argv)

    load_dotenv()
    from backerhub import create_app

    app = create_app()
    with app.app_context():
        user = create_admin(args.email, args.name, args.password)
        email = user.email

    print()
    print("Admin creation completed!")
    print(f"Email: {email}")
    print("Log in at /login to access the admin panel.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

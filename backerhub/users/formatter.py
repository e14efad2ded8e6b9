def format_user(user, token=None):
    return {
        "id": user.id,
        "name": user.name,
        "occupation": user.occupation,
        "email": user.email,
        "token": token,
        "image_url": user.avatar_file_name,
    }

import logging
import os

from werkzeug.utils import secure_filename

from backerhub.errors import ValidationError

logger = logging.getLogger(__name__)


def save_upload(file_storage, folder, prefix, url_prefix='images'):
    """
    Writes an uploaded file to ``folder`` as ``<prefix>-<safe name>`` and
    returns its path under the public mount (``images/3-avatar.png``).
    """
    if not file_storage or not getattr(file_storage, "filename", ""):
        raise ValidationError("A file is required.")

    filename = secure_filename(file_storage.filename)
    if not filename:
        raise ValidationError("Please choose a valid file name.")

    stored_name = f"{prefix}-{filename}"
    os.makedirs(folder, exist_ok=True)
    file_storage.save(os.path.join(folder, stored_name))
    logger.info(f"Stored upload {stored_name} in {folder}")
    return f"{url_prefix}/{stored_name}"

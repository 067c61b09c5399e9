import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app

IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
AUDIO_EXTENSIONS = {'mp3', 'wav', 'ogg', 'flac', 'm4a'}
VIDEO_EXTENSIONS = {'mp4', 'mov', 'webm'}
DOCUMENT_EXTENSIONS = {'pdf'}

# Upload kind -> (allowed extensions, portfolio field it fills, if any)
MEDIA_KINDS = {
    "hero_image": (IMAGE_EXTENSIONS, "hero_image_url"),
    "profile_photo": (IMAGE_EXTENSIONS, "profile_photo_url"),
    "resume": (DOCUMENT_EXTENSIONS, "resume_url"),
    "audio": (AUDIO_EXTENSIONS, None),
    "thumbnail": (IMAGE_EXTENSIONS, None),
    "gallery": (IMAGE_EXTENSIONS | VIDEO_EXTENSIONS, None),
}


class MediaStorageError(Exception):
    """Neither the primary nor the fallback bucket accepted the file."""


def file_extension(filename):
    if '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()


def allowed_file(filename, kind):
    allowed, _ = MEDIA_KINDS[kind]
    return file_extension(filename) in allowed


def _write(file, bucket, folder, unique_filename):
    target_dir = os.path.join(current_app.config["UPLOAD_ROOT"], bucket, folder)
    os.makedirs(target_dir, exist_ok=True)
    file.stream.seek(0)
    file.save(os.path.join(target_dir, unique_filename))
    return f"/media/{bucket}/{folder}/{unique_filename}"


def save_file(file, *, kind, folder):
    """
    Stores an uploaded file and returns its public URL.

    Tries the primary bucket first and falls back to the secondary one
    if writing fails.
    """
    if kind not in MEDIA_KINDS:
        raise ValueError(f"Unknown media kind: {kind}")

    if not file or not file.filename or not allowed_file(file.filename, kind):
        raise ValueError("File type not allowed")

    ext = file_extension(secure_filename(file.filename)) or file_extension(file.filename)
    unique_filename = f"{uuid.uuid4().hex}.{ext}"
    folder = secure_filename(folder)

    primary = current_app.config["MEDIA_PRIMARY_BUCKET"]
    fallback = current_app.config["MEDIA_FALLBACK_BUCKET"]

    try:
        return _write(file, primary, folder, unique_filename)
    except OSError as e:
        current_app.logger.warning(
            f"Upload to bucket '{primary}' failed ({e}), retrying in '{fallback}'"
        )

    try:
        return _write(file, fallback, folder, unique_filename)
    except OSError as e:
        current_app.logger.error(f"Upload to fallback bucket '{fallback}' failed: {e}")
        raise MediaStorageError("Failed to store uploaded file") from e


def media_path(file_url):
    """Maps a /media/... URL back to its path under UPLOAD_ROOT, or None."""
    if not file_url or not file_url.startswith("/media/"):
        return None

    root = os.path.realpath(current_app.config["UPLOAD_ROOT"])
    path = os.path.realpath(os.path.join(root, file_url[len("/media/"):]))
    if not path.startswith(root + os.sep):
        return None
    return path


def delete_file(file_url):
    """
    Deletes a stored file given its URL.
    External URLs are left alone.
    """
    file_path = media_path(file_url)
    if not file_path:
        return False

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False

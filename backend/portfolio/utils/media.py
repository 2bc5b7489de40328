import base64
import mimetypes
import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from portfolio.domain.invariants.exceptions import InvariantViolation

ALLOWED_EXTENSIONS = {'jpeg', 'jpg', 'png', 'gif', 'webp'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS

def upload_root():
    folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    if os.path.isabs(folder):
        return folder
    return os.path.join(current_app.instance_path, folder)

def read_image(file):
    if not file or not file.filename:
        raise InvariantViolation("An image file is required")

    if not allowed_file(file.filename):
        raise InvariantViolation("File type not allowed")

    data = file.read()
    max_mb = current_app.config.get('MAX_IMAGE_SIZE_MB', 5)
    if len(data) > max_mb * 1024 * 1024:
        raise InvariantViolation(f"File size must be less than {max_mb}MB")

    return data

def store_file(data, filename, bucket):
    """
    Write bytes into `bucket` under a unique name and return its public URL.
    Raises OSError when the bucket cannot be written.
    """
    ext = secure_filename(filename).rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    bucket_path = os.path.join(upload_root(), bucket)
    os.makedirs(bucket_path, exist_ok=True)

    with open(os.path.join(bucket_path, unique_filename), "wb") as fh:
        fh.write(data)

    return f"/uploads/{bucket}/{unique_filename}"

def inline_data_url(data, filename):
    mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mimetype};base64,{encoded}"

def upload_image(file):
    """
    Store an uploaded image in the image bucket.

    When the bucket cannot be written the image is returned inline as a
    base64 data URL instead, so the caller always gets something to save
    in its image field.
    """
    data = read_image(file)
    bucket = current_app.config.get('IMAGE_BUCKET', 'images')

    try:
        url = store_file(data, file.filename, bucket)
        return {"url": url, "storage": "bucket"}
    except OSError as e:
        current_app.logger.warning(f"Storage upload failed, inlining image: {e}")
        return {"url": inline_data_url(data, file.filename), "storage": "inline"}

# backend/routes/upload.py
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File

from utils.tokenJWT import require_admin
from utils.upload import UploadRejected, validate_upload, folder_for, unique_name, read_capped
from utils.storage import StoragePort, StorageError, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Upload"])


@router.post("/upload")
def upload_files(
    files: List[UploadFile] = File(...),
    storage: StoragePort = Depends(get_storage),
    _admin: bool = Depends(require_admin),
):
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")

    # Validate everything first so a bad file leaves nothing behind
    accepted = []
    try:
        for file in files:
            data = read_capped(file.file)
            kind = validate_upload(file.filename, file.content_type, len(data))
            accepted.append((file, kind, data))
    except UploadRejected as e:
        logger.warning("Upload rejected: %s", e)
        raise HTTPException(status_code=400, detail=f"File {e.filename} {e.reason}")
    finally:
        for file in files:
            file.file.close()

    paths = []
    try:
        for file, kind, data in accepted:
            paths.append(storage.save(folder_for(kind), unique_name(file.filename), data, file.content_type))
    except StorageError:
        logger.exception("Upload failed after %d of %d files", len(paths), len(accepted))
        raise HTTPException(status_code=500, detail="Failed to upload files")

    logger.info("Uploaded %d files", len(paths))
    return {"success": True, "paths": paths}

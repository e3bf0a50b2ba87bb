"""API routes for design management."""

import logging

from fastapi import APIRouter, HTTPException

from apiflow.models.design import DeleteResult, DesignCreate, DesignRecord, DesignUpdate
from apiflow.utils.identifiers import generate_design_id, next_timestamp, utc_now
from apiflow_server.design_db import (
    insert_design as db_insert_design,
    update_design as db_update_design,
    get_design as db_get_design,
    list_designs as db_list_designs,
    delete_design as db_delete_design,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_design(design_id: str) -> DesignRecord:
    design = db_get_design(design_id)
    if not design:
        raise HTTPException(status_code=404, detail=f"Design not found: {design_id}")
    return design


@router.get("/designs")
def list_designs() -> list[DesignRecord]:
    """list all designs, newest first."""
    return db_list_designs()


@router.post("/designs")
def create_design(request: DesignCreate) -> DesignRecord:
    """create a new design."""
    now = utc_now()
    design = DesignRecord(
        id=generate_design_id(),
        name=request.name,
        design_data=request.design_data,
        created_at=now,
        updated_at=now,
    )
    db_insert_design(design)
    logger.info("created design %s (%s)", design.id, design.name)
    return design


@router.get("/designs/{design_id}")
def get_design(design_id: str) -> DesignRecord:
    """get a specific design."""
    return _load_design(design_id)


@router.patch("/designs/{design_id}")
def update_design(design_id: str, request: DesignUpdate) -> DesignRecord:
    """update name and/or design data; updated_at always moves forward."""
    design = _load_design(design_id)

    # update fields that were provided
    update_data = request.model_dump(exclude_none=True)
    update_data["updated_at"] = next_timestamp(design.updated_at)
    design = design.model_copy(update=update_data)

    if not db_update_design(design):
        # deleted between the read and the write
        raise HTTPException(status_code=404, detail=f"Design not found: {design_id}")
    return design


@router.delete("/designs/{design_id}")
def delete_design(design_id: str) -> DeleteResult:
    """delete a design; success is False when nothing matched."""
    deleted = db_delete_design(design_id)
    if deleted:
        logger.info("deleted design %s", design_id)
    return DeleteResult(success=deleted)

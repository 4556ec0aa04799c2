"""Program generation and read endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.exercise import CatalogExercise
from app.schemas.program import ProgramGenerateRequest, ProgramRead, ProgramTemplate
from app.services.program_criteria import normalize_criteria
from app.services.program_generator import generate_program
from app.services.program_store import get_program, list_programs, load_exercise_catalog, save_program

router = APIRouter()


async def get_exercise_catalog(db: AsyncSession = Depends(get_db)) -> list[CatalogExercise]:
    """Dependency: catalog snapshot in id order."""
    return await load_exercise_catalog(db)


@router.post("/preview", response_model=ProgramTemplate)
async def preview_program(
    payload: ProgramGenerateRequest,
    catalog: list[CatalogExercise] = Depends(get_exercise_catalog),
):
    """Generate the weekly template without saving it."""
    criteria = normalize_criteria(payload)
    return generate_program(criteria, catalog)


@router.post("/generate", response_model=ProgramRead, status_code=201)
async def generate_and_save_program(
    payload: ProgramGenerateRequest,
    catalog: list[CatalogExercise] = Depends(get_exercise_catalog),
    db: AsyncSession = Depends(get_db),
):
    """Generate a personalized program and save it with every week materialized."""
    criteria = normalize_criteria(payload)
    template = generate_program(criteria, catalog)
    return await save_program(db, template)


@router.get("", response_model=list[ProgramRead])
async def list_all_programs(
    db: AsyncSession = Depends(get_db),
    goal: str | None = None,
    difficulty: str | None = None,
    duration: int | None = Query(None, ge=1, description="Maximum duration in days"),
    skip: int = 0,
    limit: int = 50,
):
    """List programs, newest first."""
    return await list_programs(
        db, goal=goal, difficulty=difficulty, max_duration_days=duration, skip=skip, limit=limit
    )


@router.get("/{program_id}", response_model=ProgramRead)
async def get_program_by_id(
    program_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a program with its exercises (by day, week, order)."""
    program = await get_program(db, program_id)
    if not program:
        raise HTTPException(status_code=404, detail="Program not found")
    return program

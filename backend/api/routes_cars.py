from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.database import get_db
from backend.db import crud
from backend.schemas.car import CarCreate, CarUpdate, CarFilter, CarResponse, CarDeleteResponse

router = APIRouter(prefix="/api/v1/cars", tags=["cars"])


@router.get("", response_model=list[CarResponse])
async def list_cars(filters: CarFilter = Depends(), db: AsyncSession = Depends(get_db)):
    return await crud.get_cars(db, filters)


@router.get("/brands", response_model=list[str])
async def list_car_brands(db: AsyncSession = Depends(get_db)):
    return await crud.get_car_brands(db)


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(car_id: int, db: AsyncSession = Depends(get_db)):
    car = await crud.get_car_by_id(db, car_id)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car


@router.post("", response_model=CarResponse, status_code=201)
async def create_car(request: CarCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_car(db, request)


@router.patch("/{car_id}", response_model=CarResponse)
async def update_car(car_id: int, request: CarUpdate, db: AsyncSession = Depends(get_db)):
    car = await crud.update_car(db, car_id, request)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car


@router.delete("/{car_id}", response_model=CarDeleteResponse)
async def delete_car(car_id: int, db: AsyncSession = Depends(get_db)):
    if not await crud.delete_car(db, car_id):
        raise HTTPException(status_code=404, detail="Car not found")
    return CarDeleteResponse(deleted=True)

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.auth import get_current_user
from app.core.db import get_catalog
from app.db.repositories.catalog_repository import CatalogRepository
from app.domains.documents.navigation import (
    clients_for_cabinet, matters_for_client, recent_clients, recent_matters
)
from app.domains.documents.schemas import CabinetResponse, ClientResponse, MatterResponse

router = APIRouter(tags=["records"], dependencies=[Depends(get_current_user)])


@router.get("/cabinets", response_model=List[CabinetResponse])
async def list_cabinets(catalog: CatalogRepository = Depends(get_catalog)):
    """Список кабинетов"""
    return [CabinetResponse.model_validate(cabinet) for cabinet in catalog.cabinets]


@router.get("/cabinets/{cabinet_id}/clients", response_model=List[ClientResponse])
async def list_cabinet_clients(
    cabinet_id: str,
    recent: bool = Query(False, description="Только первые клиенты для страницы кабинета"),
    catalog: CatalogRepository = Depends(get_catalog)
):
    """Клиенты кабинета"""
    if catalog.get_cabinet(cabinet_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cabinet not found")

    if recent:
        clients = recent_clients(catalog.clients, cabinet_id)
    else:
        clients = clients_for_cabinet(catalog.clients, cabinet_id)
    return [ClientResponse.model_validate(client) for client in clients]


@router.get("/cabinets/{cabinet_id}/matters", response_model=List[MatterResponse])
async def list_cabinet_matters(
    cabinet_id: str,
    catalog: CatalogRepository = Depends(get_catalog)
):
    """Недавние дела клиентов кабинета"""
    if catalog.get_cabinet(cabinet_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cabinet not found")

    matters = recent_matters(catalog.matters, catalog.clients, cabinet_id)
    return [MatterResponse.model_validate(matter) for matter in matters]


@router.get("/clients/{client_id}/matters", response_model=List[MatterResponse])
async def list_client_matters(
    client_id: str,
    catalog: CatalogRepository = Depends(get_catalog)
):
    """Дела клиента"""
    if catalog.get_client(client_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")

    matters = matters_for_client(catalog.matters, client_id)
    return [MatterResponse.model_validate(matter) for matter in matters]

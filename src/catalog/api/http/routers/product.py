"""Server-rendered product pages: list, form, save and delete."""

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from loguru import logger

from src.catalog.api.http.deps import get_catalog_config, get_product_service, templates
from src.catalog.api.http.flash import FlashKind, clear_flash, read_flash, set_flash
from src.catalog.api.http.forms import ProductForm, bind_product_form
from src.catalog.core.exceptions import NotFoundError, ValidationError
from src.catalog.core.models.pagination import SORT_FIELDS, Pageable, SortDirection
from src.catalog.core.services.product_service import ProductService
from src.catalog.runtime.config.config_data import CatalogConfig

router = APIRouter(prefix="/products", tags=["products"])

LIST_URL = "/products/"
NOT_FOUND_MESSAGE = "Product not found"


def _redirect_to_list(kind: FlashKind | None = None, message: str | None = None) -> RedirectResponse:
    response = RedirectResponse(url=LIST_URL, status_code=303)
    if kind is not None and message is not None:
        set_flash(response, kind, message)
    return response


def _render(request: Request, name: str, context: dict) -> HTMLResponse:
    flash = read_flash(request)
    response = templates.TemplateResponse(request, name, {**context, "flash": flash})
    clear_flash(request, response)
    return response


def _render_form(request: Request, form: ProductForm) -> HTMLResponse:
    return _render(request, "products/form.html", {"form": form})


def _listing_pageable(
    page: int, size: int | None, sort: str | None, direction: str | None, cfg: CatalogConfig
) -> Pageable:
    if page < 0:
        logger.warning("Page {} is negative; using 0", page)
        page = 0

    if size is None:
        size = cfg.default_page_size
    elif size < 1:
        logger.warning("Page size {} is too small; using {}", size, cfg.default_page_size)
        size = cfg.default_page_size
    elif size > cfg.max_page_size:
        logger.warning("Page size {} exceeds maximum; using {}", size, cfg.max_page_size)
        size = cfg.max_page_size

    sort_field = sort or cfg.default_sort
    if sort_field not in SORT_FIELDS:
        logger.warning("Unknown sort field {!r}; using {!r}", sort_field, cfg.default_sort)
        sort_field = cfg.default_sort

    try:
        sort_direction = SortDirection.parse(direction or SortDirection.ASC)
    except ValueError:
        logger.warning("Unknown sort direction {!r}; using 'asc'", direction)
        sort_direction = SortDirection.ASC

    return Pageable(page=page, size=size, sort_field=sort_field, direction=sort_direction)


@router.get("/", response_class=HTMLResponse)
def list_products(
    request: Request,
    q: str | None = None,
    page: int = 0,
    size: int | None = None,
    sort: str | None = None,
    direction: str | None = Query(None, alias="dir"),
    service: ProductService = Depends(get_product_service),
    cfg: CatalogConfig = Depends(get_catalog_config),
) -> HTMLResponse:
    """List products, optionally filtered by a name search term."""
    pageable = _listing_pageable(page, size, sort, direction, cfg)
    result = service.list_products(q, pageable)
    return _render(
        request,
        "products/list.html",
        {
            "page": result,
            "q": q or "",
            "sort": sort if sort in SORT_FIELDS else pageable.sort_field,
            "dir": pageable.direction.value,
            "size": pageable.size,
        },
    )


@router.get("/new", response_class=HTMLResponse)
def new_product(request: Request) -> HTMLResponse:
    """Show an empty product form."""
    return _render_form(request, ProductForm.empty())


@router.post("/", response_class=HTMLResponse, response_model=None)
def save_product(
    request: Request,
    product_id: str | None = Form(None, alias="id"),
    name: str | None = Form(None),
    description: str | None = Form(None),
    price: str | None = Form(None),
    stock: str | None = Form(None),
    active: str | None = Form(None),
    active_marker: str | None = Form(None, alias="_active"),
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Create or update a product from the submitted form."""
    form = bind_product_form(
        id=product_id,
        name=name,
        description=description,
        price=price,
        stock=stock,
        active=active,
        active_marker=active_marker,
    )
    if not form.is_valid:
        logger.warning(
            "Rejected product submission: {}",
            ", ".join(f"{e.field}={e.message}" for e in form.errors),
        )
        return _render_form(request, form)

    try:
        saved = service.save(form.product)
    except NotFoundError:
        logger.warning("Update of missing product {}", form.product.id)
        return _redirect_to_list("error", NOT_FOUND_MESSAGE)
    except ValidationError as e:
        form.errors = e.errors
        return _render_form(request, form)

    action = "Updated" if form.is_update else "Created"
    logger.info("{} product {} ({!r})", action, saved.id, saved.name)
    return _redirect_to_list()


@router.get("/edit/{product_id}", response_class=HTMLResponse, response_model=None)
def edit_product(
    request: Request,
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Show the form filled from an existing product."""
    product = service.find_by_id(product_id)
    if product is None:
        logger.warning("Edit requested for missing product {}", product_id)
        return _redirect_to_list("error", NOT_FOUND_MESSAGE)
    return _render_form(request, ProductForm.from_product(product))


@router.post("/delete/{product_id}")
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> RedirectResponse:
    """Delete a product; deleting an absent id is not an error."""
    service.delete_by_id(product_id)
    logger.info("Deleted product {}", product_id)
    return _redirect_to_list("success", "Product deleted!")

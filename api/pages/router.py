"""
Legacy page redirects.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from . import service

router = APIRouter()


@router.get("/generate-files")
async def generate_files(request: Request) -> RedirectResponse:
    target = service.redirect_target(request.query_params, allowed=("brandId",), fragment="files")
    return RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/blog-writer")
async def blog_writer(request: Request) -> RedirectResponse:
    target = service.redirect_target(request.query_params, allowed=("brandId", "blogId"), fragment="ugc")
    return RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)

"""
Blog Backend - HTML Page Routes
================================

What:  Server-rendered pages: home, all posts, post detail, create post.
How:   Each handler builds a view around a PostsClient, runs the view's
       action, and renders a Jinja2 template from the view's state.
       Pages never query the database; every read and write goes through
       the JSON API.
Who:   Browsers. The shared layout (templates/base.html) carries the navbar.

Confirmation:
    Delete forms carry a hidden `confirmed` field that the browser's
    confirm() dialog sets to "yes". The view's confirm callback reads it,
    so a form posted without the dialog's approval deletes nothing.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blogapp.client.posts_client import PostsClient, get_posts_client
from blogapp.views import PostCreateView, PostDetailView, PostListView
from blogapp.views.post_list import (
    CONFIRM_DELETE_ALL,
    CONFIRM_DELETE_ONE,
    EMPTY_PLACEHOLDER,
)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["Pages"], include_in_schema=False)


def _confirmed(value: str):
    """Build a confirm callback from the form's `confirmed` field."""
    return lambda prompt: value == "yes"


def _render_list(request: Request, view: PostListView) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "posts/list.html",
        {
            "view": view,
            "empty_placeholder": EMPTY_PLACEHOLDER,
            "confirm_delete_one": CONFIRM_DELETE_ONE,
            "confirm_delete_all": CONFIRM_DELETE_ALL,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "home.html", {})


@router.get("/posts", response_class=HTMLResponse)
async def posts_page(
    request: Request,
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    view = PostListView(api)
    await view.refresh()
    return _render_list(request, view)


@router.post("/posts/delete-all", response_class=HTMLResponse)
async def delete_all_posts(
    request: Request,
    confirmed: str = Form(""),
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    view = PostListView(api)
    await view.refresh()
    await view.delete_all(confirm=_confirmed(confirmed))
    return _render_list(request, view)


@router.post("/posts/{post_id}/delete", response_class=HTMLResponse)
async def delete_post(
    request: Request,
    post_id: int,
    confirmed: str = Form(""),
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    view = PostListView(api)
    await view.refresh()
    await view.delete_one(post_id, confirm=_confirmed(confirmed))
    return _render_list(request, view)


@router.get("/posts/{post_id}", response_class=HTMLResponse)
async def post_detail_page(
    request: Request,
    post_id: int,
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    view = PostDetailView(api)
    await view.load(post_id)
    return templates.TemplateResponse(
        request,
        "posts/detail.html",
        {"view": view},
        status_code=404 if view.missing else 200,
    )


@router.get("/create-post", response_class=HTMLResponse)
async def create_post_page(
    request: Request,
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    return templates.TemplateResponse(request, "create_post.html", {"view": PostCreateView(api)})


@router.post("/create-post", response_class=HTMLResponse)
async def submit_post(
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    api: PostsClient = Depends(get_posts_client),
) -> HTMLResponse:
    view = PostCreateView(api, title=title, content=content)
    await view.submit()
    return templates.TemplateResponse(request, "create_post.html", {"view": view})

"""
FastAPI routers grouped by surface (public pages, admin).

Each module exposes an APIRouter included by koikukuri.app.create_app. Routers
reach the SiteService through request.app.state.site.
"""

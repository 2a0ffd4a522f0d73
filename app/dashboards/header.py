# app/dashboards/header.py
from app.dashboards.dashboard_schemas import HeaderView
from app.users.user_models.schemas import User

ROLE_COLORS = {
    "admin": "red",
    "doctor": "blue",
    "nurse": "purple",
    "patient": "green",
}


def role_color(role: str) -> str:
    return ROLE_COLORS.get(role, "gray")


def role_label(role: str) -> str:
    return role[:1].upper() + role[1:]


def build_header(user: User) -> HeaderView:
    return HeaderView(
        full_name=user.full_name,
        role=user.role,
        role_label=role_label(user.role),
        role_color=role_color(user.role),
        logout_action="/api/auth/logout",
    )

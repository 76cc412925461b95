# addicted/routes/dashboard.py
from flask import Blueprint, current_app, render_template

from addicted.dashboard import PRICE_ELEMENT_ID, SUPPLY_ELEMENT_ID, DashboardPage, update_dashboard

dashboard_bp = Blueprint("dashboard_bp", __name__)


@dashboard_bp.route("/", methods=["GET"])
@dashboard_bp.route("/dashboard", methods=["GET"])
def dashboard():
    """Fresh page per load, one update, then render."""
    page = DashboardPage()
    update_dashboard(page, current_app.config["SETTINGS"])
    return render_template(
        "dashboard.html",
        page=page,
        price_id=PRICE_ELEMENT_ID,
        supply_id=SUPPLY_ELEMENT_ID,
    )

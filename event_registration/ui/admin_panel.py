"""Admin panel UI component for registration management."""
import logging
import traceback
from typing import Optional

import streamlit as st

from event_registration.models.registration import Registration
from event_registration.services.admin_query_service import (
    delete_registration,
    export_csv,
    export_filename,
    get_registration,
    get_stats,
    list_registrations,
)
from event_registration.services.admin_service import authorize, login_admin, logout_admin
from event_registration.ui.html_utils import escape_html, html_block, stat_card
from event_registration.utils.date_utils import format_display_datetime
from event_registration.utils.exceptions import AuthenticationError, StorageError

logger = logging.getLogger(__name__)

ADMIN_TOKEN_KEY = "admin_token"


def _show_admin_exception(error: Exception, context: str) -> None:
    """Display error details in UI and log full traceback."""
    logger.exception("Admin panel error during %s", context)

    st.error(f"❌ {context} failed: {error}")
    with st.expander("🔍 Error details"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def _current_token() -> Optional[str]:
    return st.session_state.get(ADMIN_TOKEN_KEY)


def _set_feedback(level: str, message: str) -> None:
    st.session_state["admin_feedback"] = (level, message)


def _render_feedback() -> None:
    feedback = st.session_state.pop("admin_feedback", None)
    if not feedback:
        return

    level, message = feedback
    if level == "success":
        st.success(message)
    elif level == "error":
        st.error(message)
    else:
        st.info(message)


def _detail_block(registration: Registration) -> str:
    """Markup for the registration detail view."""
    rows = [
        ("Name", registration.name),
        ("Email", registration.email),
        ("Phone", registration.phone),
        ("College", registration.college),
        ("Branch", registration.branch),
        ("Year", registration.year),
    ]
    cells = "\n".join(
        f"<div><div class='detail-label'>{label}</div>"
        f"<div class='detail-value'>{escape_html(value)}</div></div>"
        for label, value in rows
    )
    return html_block(
        f"""
        <div class="detail-grid">
        {cells}
        </div>
        <div class="detail-label">Reason for Attending</div>
        <div class="detail-reason">{escape_html(registration.interest)}</div>
        <div class="detail-footer">Registered: {escape_html(format_display_datetime(registration.created_at))}</div>
        """
    )


def _export_payload(token: str) -> Optional[str]:
    """CSV text for download, or None when there is nothing to export."""
    if not list_registrations(token):
        return None
    return export_csv(token)


def render_login_page():
    """Render admin login page."""
    with st.form("admin_login_form", clear_on_submit=False):
        st.markdown("### 🔐 Admin Login")

        username = st.text_input("Username", key="admin_username_input")
        password = st.text_input("Password", type="password", key="admin_password_input")

        submit = st.form_submit_button("Login", width='stretch', type="primary")

    if not submit:
        return

    if not username or not password:
        st.error("❌ Please enter username and password")
        return

    try:
        token = login_admin(username.strip(), password)
    except AuthenticationError:
        st.error("❌ Invalid credentials. Please try again.")
        return

    st.session_state[ADMIN_TOKEN_KEY] = token
    _set_feedback("success", "Welcome, Admin!")
    st.rerun()


def render_stats(token: str) -> None:
    stats = get_stats(token)

    col1, col2, col3 = st.columns(3, gap="small")
    with col1:
        st.markdown(stat_card("Total Registrations", stats["total"]), unsafe_allow_html=True)
    with col2:
        st.markdown(stat_card("Today", stats["today"]), unsafe_allow_html=True)
    with col3:
        st.markdown(stat_card("Top Branch", stats["top_branch"]), unsafe_allow_html=True)


def render_registration_table(token: str) -> None:
    """Render search box, registration rows and per-row actions."""
    query = st.text_input("🔍 Search by name or email", key="admin_search")
    registrations = list_registrations(token, query)

    if not registrations:
        st.info("📝 No registrations found")
        return

    st.dataframe(
        [
            {
                "Name": r.name,
                "Email": r.email,
                "College": r.college,
                "Branch": r.branch,
                "Year": r.year,
                "Registered": format_display_datetime(r.created_at),
            }
            for r in registrations
        ],
        hide_index=True,
        width='stretch',
    )

    options = {r.id: f"{r.name} <{r.email}>" for r in registrations}
    selected_id = st.selectbox(
        "Select registration",
        options=list(options.keys()),
        format_func=lambda x: options[x],
        key="admin_selected_registration",
    )

    view_col, delete_col = st.columns(2, gap="small")
    with view_col:
        if st.button("👁️ View details", width='stretch'):
            st.session_state.admin_action = "detail"
            st.session_state.admin_registration_id = selected_id
    with delete_col:
        if st.button("🗑️ Delete", width='stretch'):
            st.session_state.admin_action = "delete"
            st.session_state.admin_registration_id = selected_id


def render_registration_detail(token: str) -> None:
    registration = get_registration(token, st.session_state.get("admin_registration_id"))
    if registration is None:
        st.warning("Registration not found")
        st.session_state.admin_action = None
        return

    st.markdown("### Registration details")
    st.markdown(_detail_block(registration), unsafe_allow_html=True)
    if st.button("Close", key="admin_close_detail"):
        st.session_state.admin_action = None
        st.rerun()


def render_delete_confirmation(token: str) -> None:
    """Render delete confirmation for the selected registration."""
    registration_id = st.session_state.get("admin_registration_id")
    registration = get_registration(token, registration_id)
    if registration is None:
        st.warning("Registration not found")
        st.session_state.admin_action = None
        return

    st.warning(f"⚠️ Delete the registration of **{registration.name}** ({registration.email})?")

    confirm_col, cancel_col = st.columns(2, gap="small")
    with confirm_col:
        if st.button("✅ Confirm delete", type="primary", width='stretch'):
            result = delete_registration(token, registration_id)
            if result["deleted"]:
                _set_feedback("success", "Registration deleted.")
            else:
                _set_feedback("info", "Registration was already removed.")
            st.session_state.admin_action = None
            st.rerun()
    with cancel_col:
        if st.button("❌ Cancel", width='stretch'):
            st.session_state.admin_action = None
            st.rerun()


def render_admin_panel():
    """Render admin management panel."""
    token = _current_token()
    if not authorize(token):
        st.session_state.pop(ADMIN_TOKEN_KEY, None)
        render_login_page()
        return

    try:
        _render_feedback()

        header_col, export_col, logout_col = st.columns([3, 1, 1], gap="small")
        with header_col:
            st.markdown("## 📊 Admin Dashboard")
        with export_col:
            csv_text = _export_payload(token)
            if csv_text is None:
                st.button("⬇️ Export CSV", disabled=True, help="No data to export.", width='stretch')
            else:
                st.download_button(
                    "⬇️ Export CSV",
                    data=csv_text,
                    file_name=export_filename(),
                    mime="text/csv",
                    width='stretch',
                )
        with logout_col:
            if st.button("🚪 Logout", width='stretch'):
                logout_admin(token)
                st.session_state.pop(ADMIN_TOKEN_KEY, None)
                st.session_state.current_page = "register"
                st.rerun()

        render_stats(token)
        render_registration_table(token)

        if st.session_state.get("admin_action") == "detail":
            render_registration_detail(token)
        elif st.session_state.get("admin_action") == "delete":
            render_delete_confirmation(token)
    except AuthenticationError:
        st.session_state.pop(ADMIN_TOKEN_KEY, None)
        st.warning("Your admin session has expired. Please log in again.")
    except StorageError as error:
        _show_admin_exception(error, "Loading registrations")

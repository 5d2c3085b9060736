"""
Event registration application
Registration form and admin dashboard
"""
import logging

import streamlit as st

from event_registration.config import get_log_level
from event_registration.ui.admin_panel import render_admin_panel
from event_registration.ui.registration_page import render_registration_page

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Streamlit page configuration
st.set_page_config(
    page_title="Event Registration",
    page_icon="🎟️",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Initialize session state defaults."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "register"

    if "admin_action" not in st.session_state:
        st.session_state.admin_action = None

    if "admin_registration_id" not in st.session_state:
        st.session_state.admin_registration_id = None


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
            border: none;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .stat-card {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 12px;
            padding: 16px;
            text-align: center;
        }

        .stat-value {
            font-size: 2rem;
            font-weight: 700;
            color: #f1f5f9;
        }

        .stat-label, .detail-label {
            font-size: 0.75rem;
            color: #94a3b8;
            text-transform: uppercase;
            letter-spacing: 0.05em;
        }

        .detail-grid {
            display: grid;
            grid-template-columns: 1fr 1fr;
            gap: 1rem;
            margin-bottom: 1rem;
        }

        .detail-reason {
            background: rgba(255, 255, 255, 0.03);
            border: 1px solid #2d3748;
            border-radius: 8px;
            padding: 1rem;
            line-height: 1.6;
        }

        .detail-footer {
            font-size: 0.8rem;
            color: #94a3b8;
            text-align: right;
        }

        .registration-success {
            background: #10b98150;
            border-left: 4px solid #10b981;
            border-radius: 8px;
            padding: 12px 16px;
            color: #d1fae5;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """Render the navigation bar."""
    nav_col1, _, nav_col2 = st.columns([1, 3, 1], gap="small")

    with nav_col1:
        if st.button("📝 Register", width='stretch', key="nav_register"):
            st.session_state.current_page = "register"

    with nav_col2:
        if st.button("👤 Admin", width='stretch', key="nav_admin"):
            st.session_state.current_page = "admin"


def render_current_page():
    """Render content for the current page."""
    try:
        if st.session_state.current_page == "register":
            render_registration_page()

        elif st.session_state.current_page == "admin":
            render_admin_panel()

        else:
            st.error(f"Unknown page: {st.session_state.current_page}")
            if st.button("Back to registration"):
                st.session_state.current_page = "register"
                st.rerun()

    except Exception as e:
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong. Please try again later.")

        with st.expander("🔍 Error details"):
            st.code(str(e))


def main():
    """Application entry point."""
    initialize_session_state()
    apply_custom_css()
    render_navigation()
    render_current_page()


if __name__ == "__main__":
    main()

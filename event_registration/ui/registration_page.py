"""Public registration form."""

import streamlit as st

from event_registration.services.registration_service import register
from event_registration.ui.html_utils import escape_html, html_block
from event_registration.utils.exceptions import (
    DuplicateEmailError,
    StorageError,
    ValidationError,
)


BRANCH_OPTIONS = ["", "CSE", "ISE", "ECE", "EEE", "ME", "CE", "AIML", "Other"]
YEAR_OPTIONS = ["", "1st Year", "2nd Year", "3rd Year", "4th Year"]

FIELD_LABELS = {
    "name": "Full name",
    "email": "Email",
    "phone": "Phone",
    "college": "College",
    "branch": "Branch",
    "year": "Year",
    "interest": "Why do you want to attend?",
}

REG_FEEDBACK = "registration_feedback"


def _validation_message(error: ValidationError) -> str:
    """Turn a ValidationError into text for the form."""
    if error.reason == "missing_fields" and error.fields:
        labels = ", ".join(FIELD_LABELS.get(f, f) for f in error.fields)
        return f"Please fill in all fields. Missing: {labels}"
    return str(error)


def _success_block(name: str, email: str) -> str:
    return html_block(
        f"""
        <div class="registration-success">
            <h3>🎉 You're registered, {escape_html(name)}!</h3>
            <p>A confirmation will reach {escape_html(email)} closer to the event.</p>
        </div>
        """
    )


def render_registration_page():
    """Render the registration form and handle submission."""
    st.markdown("## 📝 Register for the event")

    feedback = st.session_state.pop(REG_FEEDBACK, None)
    if feedback:
        st.markdown(feedback, unsafe_allow_html=True)

    with st.form("registration_form", clear_on_submit=False):
        name = st.text_input(FIELD_LABELS["name"], key="reg_name")
        col1, col2 = st.columns(2, gap="small")
        with col1:
            email = st.text_input(FIELD_LABELS["email"], key="reg_email")
        with col2:
            phone = st.text_input(FIELD_LABELS["phone"], key="reg_phone")

        college = st.text_input(FIELD_LABELS["college"], key="reg_college")
        col3, col4 = st.columns(2, gap="small")
        with col3:
            branch = st.selectbox(FIELD_LABELS["branch"], BRANCH_OPTIONS, key="reg_branch")
        with col4:
            year = st.selectbox(FIELD_LABELS["year"], YEAR_OPTIONS, key="reg_year")

        interest = st.text_area(FIELD_LABELS["interest"], key="reg_interest")

        submit = st.form_submit_button("Register Now →", type="primary", width='stretch')

    if not submit:
        return

    form_data = {
        "name": name,
        "email": email,
        "phone": phone,
        "college": college,
        "branch": branch,
        "year": year,
        "interest": interest,
    }

    try:
        registration = register(form_data)
    except ValidationError as error:
        st.error(f"❌ {_validation_message(error)}")
        return
    except DuplicateEmailError:
        st.error("❌ This email is already registered.")
        return
    except StorageError:
        st.error("❌ Registration failed due to a server error. Please try again.")
        return

    for field in FIELD_LABELS:
        st.session_state.pop(f"reg_{field}", None)
    st.session_state[REG_FEEDBACK] = _success_block(registration.name, registration.email)
    st.rerun()

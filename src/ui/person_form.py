"""Person form UI component for parking pass registration."""
import logging
import traceback
from datetime import date

import streamlit as st

from src.services.parking_service import (
    get_parking_pass_status,
    load_example_person,
    purchase_parking_pass,
    save_person,
)
from src.ui.html_utils import status_label

logger = logging.getLogger(__name__)

NAME_KEY = "name_input"
DOB_KEY = "dob_input"
EMAIL_KEY = "email_input"

MIN_DATE_OF_BIRTH = date(1900, 1, 1)


def _show_form_exception(error: Exception, context: str) -> None:
    """Display error details in UI and log full traceback."""
    logger.exception("Person form error during %s", context)

    st.error(f"❌ {context} failed: {error}")
    with st.expander("🔍 Error details"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def _display_person(person) -> None:
    """Write the person's fields back into the form inputs."""
    st.session_state[NAME_KEY] = person.name
    st.session_state[DOB_KEY] = person.date_of_birth
    st.session_state[EMAIL_KEY] = person.email_address


def _flash(level: str, message: str) -> None:
    st.session_state.flash = (level, message)


def _on_save() -> None:
    person, message = save_person(
        st.session_state[NAME_KEY],
        st.session_state[DOB_KEY],
        st.session_state[EMAIL_KEY],
    )
    if person is None:
        _flash("error", message)
        return

    st.session_state.person = person
    _display_person(person)
    _flash("success", message)


def _on_load_example() -> None:
    person = load_example_person()
    st.session_state.person = person
    _display_person(person)
    st.session_state.flash = None


def _on_buy_pass() -> None:
    person = st.session_state.person
    success, message = purchase_parking_pass(person)
    if person is not None:
        _display_person(person)
    _flash("success" if success else "error", message)


def _render_flash() -> None:
    """Show and consume the pending flash message."""
    flash = st.session_state.get("flash")
    if not flash:
        return

    level, message = flash
    if level == "error":
        st.error(message)
    else:
        st.success(message)
    st.session_state.flash = None


def render_person_form() -> None:
    """Render the person form with the parking pass status."""
    st.markdown("## 🅿️ Parking Pass Registration")

    try:
        st.text_input("Name", key=NAME_KEY)
        st.date_input(
            "Date of birth",
            value=None,
            min_value=MIN_DATE_OF_BIRTH,
            max_value=date.today(),
            key=DOB_KEY,
        )
        st.text_input("Email address", key=EMAIL_KEY)

        person = st.session_state.get("person")
        if person is not None:
            message, color = get_parking_pass_status(person)
            st.markdown(status_label(message, color), unsafe_allow_html=True)

        save_col, example_col, buy_col = st.columns(3, gap="small")
        with save_col:
            st.button("💾 Save", key="save_button", type="primary", on_click=_on_save)
        with example_col:
            st.button("📋 Load Example", key="load_example_button", on_click=_on_load_example)
        with buy_col:
            st.button("🎫 Buy Pass", key="buy_pass_button", on_click=_on_buy_pass)

        _render_flash()
    except Exception as e:
        _show_form_exception(e, "Rendering form")

"""
Parking Pass Registration
"""
import logging
import streamlit as st

from src.ui.person_form import DOB_KEY, EMAIL_KEY, NAME_KEY, render_person_form

logger = logging.getLogger(__name__)


# Streamlit page config
st.set_page_config(
    page_title="Parking Pass Registration",
    page_icon="🅿️",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Initialize session state defaults."""
    if "person" not in st.session_state:
        st.session_state.person = None

    if "flash" not in st.session_state:
        st.session_state.flash = None

    # Form inputs
    if NAME_KEY not in st.session_state:
        st.session_state[NAME_KEY] = ""

    if DOB_KEY not in st.session_state:
        st.session_state[DOB_KEY] = None

    if EMAIL_KEY not in st.session_state:
        st.session_state[EMAIL_KEY] = ""


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        /* Hide default Streamlit chrome */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        /* Buttons */
        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
            width: 100%;
        }

        /* Error messages */
        .stError {
            border-left: 4px solid #ef4444;
            border-radius: 8px;
        }

        /* Success messages */
        .stSuccess {
            border-left: 4px solid #10b981;
            border-radius: 8px;
        }
        </style>
    """, unsafe_allow_html=True)


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        apply_custom_css()
        render_person_form()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error, please refresh the page")
        st.code(str(e))

        # Try resetting state
        if st.button("🔄 Reset"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()

"""endless_translating.state.session_keys

Centralized Streamlit session_state keys to prevent typos.
"""

SESSION_CONTROLLER = "session_controller"
ANSWER_INPUT = "answer_input"

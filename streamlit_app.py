"""
Record Keeper - Streamlit Frontend

Browser interface for the Record Keeper API:
- search records
- browse every record
- update a record
- chat with the assistant (tables, sector charts, clickable commands)

Run with: streamlit run streamlit_app.py
"""
import os
from typing import Any, Dict, Optional

import requests
import streamlit as st

from recordkeeper.analytics.visualizer import Visualizer

# ============================================================
# Configuration
# ============================================================

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

st.set_page_config(
    page_title="Record Keeper",
    page_icon="🗂️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .stApp {
        background-color: #fdfbf7;
    }
    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 3rem;
        max-width: 1100px;
    }
    .stChatMessage {
        background-color: #ffffff;
        border-radius: 12px;
        border: 1px solid #f3f4f6;
    }
    .stButton > button {
        border-radius: 8px;
        font-weight: 600;
    }
</style>
""", unsafe_allow_html=True)


# ============================================================
# Session State Initialization
# ============================================================

def init_session_state():
    """Initialize session state variables."""
    if "messages" not in st.session_state:
        st.session_state.messages = []
    if "backend_connected" not in st.session_state:
        st.session_state.backend_connected = False
    if "pending_prompt" not in st.session_state:
        st.session_state.pending_prompt = None
    if "welcomed" not in st.session_state:
        st.session_state.welcomed = False


def check_backend() -> bool:
    """Check if backend is available."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=10)
        st.session_state.backend_connected = response.status_code == 200
    except requests.exceptions.RequestException:
        st.session_state.backend_connected = False
    return st.session_state.backend_connected


# ============================================================
# API Functions
# ============================================================

def _error_message(response: requests.Response, fallback: str) -> str:
    try:
        return response.json().get("message", fallback)
    except ValueError:
        return fallback


def search_records(query: str) -> Dict[str, Any]:
    """Search records by name or value."""
    try:
        response = requests.get(f"{API_BASE_URL}/search", params={"q": query}, timeout=15)
        if response.status_code == 200:
            return response.json()
        return {"error": _error_message(response, "Error searching records")}
    except requests.exceptions.RequestException:
        return {"error": "Error searching records"}


def load_all_records() -> Dict[str, Any]:
    """Fetch every record."""
    try:
        response = requests.get(f"{API_BASE_URL}/records", timeout=15)
        if response.status_code == 200:
            return response.json()
        return {"error": _error_message(response, "Error loading records")}
    except requests.exceptions.RequestException:
        return {"error": "Error loading records"}


def update_record(record_id: int, name: str, value: str) -> Dict[str, Any]:
    """Replace name and value of a record."""
    try:
        response = requests.post(
            f"{API_BASE_URL}/update",
            json={"id": record_id, "name": name, "value": value},
            timeout=15,
        )
        if response.status_code == 200:
            return response.json()
        return {"error": _error_message(response, "Error updating record")}
    except requests.exceptions.RequestException:
        return {"error": "Error updating record"}


def send_message(message: str) -> Dict[str, Any]:
    """Send a message to the chat API."""
    try:
        response = requests.post(f"{API_BASE_URL}/chat", json={"message": message}, timeout=120)
        if response.status_code == 200:
            return response.json()
        return {"error": "Sorry, I encountered an error processing your request."}
    except requests.exceptions.Timeout:
        return {"error": "Request timed out. Please try again."}
    except requests.exceptions.RequestException:
        return {"error": "Sorry, there was an error communicating with the server."}


# ============================================================
# UI Components
# ============================================================

def render_records(records: list, empty_text: str = "No records found"):
    """Show records as a table."""
    if not records:
        st.info(empty_text)
        return
    st.dataframe(Visualizer.records_to_frame(records), use_container_width=True, hide_index=True)


def render_sidebar():
    """Connection status and update form."""
    with st.sidebar:
        st.title("🗂️ Record Keeper")

        if st.session_state.backend_connected:
            st.success("🟢 System Online")
        else:
            st.error("🔴 System Offline")
            if st.button("🔄 Reconnect", use_container_width=True):
                if check_backend():
                    st.rerun()
            return

        st.divider()
        st.subheader("✏️ Update Record")

        with st.form("update_form", clear_on_submit=True):
            record_id = st.number_input("ID", min_value=1, step=1, value=None)
            name = st.text_input("Name")
            value = st.text_input("Value")
            submitted = st.form_submit_button("Update", use_container_width=True)

        if submitted:
            if not record_id or not name.strip() or not value.strip():
                st.error("Please fill in all fields")
            else:
                result = update_record(int(record_id), name, value)
                if "error" in result:
                    st.error(result["error"])
                else:
                    st.success(result.get("message", "Record updated successfully"))


def render_search():
    """Search tab."""
    query = st.text_input("Search records", placeholder="e.g. technology")
    if st.button("🔍 Search"):
        result = search_records(query)
        if "error" in result:
            st.error(result["error"])
        else:
            st.caption(f"{result.get('count', 0)} records")
            render_records(result.get("data", []))


def render_all_records():
    """All-records tab."""
    if st.button("📋 Load all records"):
        result = load_all_records()
        if "error" in result:
            st.error(result["error"])
        else:
            render_records(result.get("data", []))


def render_reply(reply: Dict[str, Any], key: str):
    """Render one assistant reply: text, commands, table or chart."""
    st.markdown(reply.get("content", ""))

    visualization = reply.get("visualization")
    data = reply.get("data")

    if visualization == "commands" and isinstance(data, dict):
        for category, commands in data.items():
            cols = st.columns(len(commands) or 1)
            for idx, command in enumerate(commands):
                if cols[idx].button(command, key=f"{key}_{category}_{idx}"):
                    st.session_state.pending_prompt = command
                    st.rerun()

    elif visualization == "chart" and isinstance(data, dict):
        fig = Visualizer.create_chart(data, reply.get("chart_type"))
        if fig:
            st.plotly_chart(fig, use_container_width=True, key=f"{key}_chart")

    elif visualization in ("table", "list") and isinstance(data, list):
        render_records(data)


def _ask(prompt: str) -> Dict[str, Any]:
    response = send_message(prompt)
    if "error" in response:
        return {"role": "assistant", "content": response["error"]}
    return {
        "role": "assistant",
        "content": response.get("message", ""),
        "data": response.get("data"),
        "visualization": response.get("visualization"),
        "chart_type": response.get("chart_type"),
    }


def render_chat():
    """Assistant tab."""
    # Welcome message with the command catalog on first load
    if not st.session_state.welcomed:
        st.session_state.welcomed = True
        welcome = _ask("help")
        st.session_state.messages.append({
            "role": "assistant",
            "content": "👋 Welcome! Here are some things you can ask me:",
        })
        st.session_state.messages.append(welcome)

    for i, msg in enumerate(st.session_state.messages):
        with st.chat_message(msg["role"]):
            if msg["role"] == "assistant":
                render_reply(msg, key=f"msg_{i}")
            else:
                st.markdown(msg["content"])

    prompt: Optional[str] = st.chat_input("Ask about your records...")
    if st.session_state.pending_prompt:
        prompt = st.session_state.pending_prompt
        st.session_state.pending_prompt = None

    if prompt:
        st.session_state.messages.append({"role": "user", "content": prompt})
        with st.spinner("Thinking..."):
            st.session_state.messages.append(_ask(prompt))
        st.rerun()


# ============================================================
# Main App
# ============================================================

def main():
    """Main application entry point."""
    init_session_state()

    if not st.session_state.backend_connected:
        check_backend()

    render_sidebar()

    if not st.session_state.backend_connected:
        st.warning("⚠️ Cannot connect to backend. Please start the server:")
        st.code("uvicorn recordkeeper.api.main:app --reload --port 8000", language="bash")
        return

    tab_chat, tab_search, tab_records = st.tabs(["💬 Assistant", "🔍 Search", "📋 All Records"])
    with tab_chat:
        render_chat()
    with tab_search:
        render_search()
    with tab_records:
        render_all_records()


if __name__ == "__main__":
    main()

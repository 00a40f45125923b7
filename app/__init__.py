"""
User-facing front ends — interactive console session and Streamlit dashboard.
"""

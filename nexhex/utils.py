# utils.py
import logging

import streamlit as st

from . import constantes as cst


def safe_rerun():
    """Force le rechargement de la page de manière compatible."""
    try:
        st.rerun()
    except AttributeError:
        st.experimental_rerun()


def configure_logging(level=None):
    """Journalisation console pour l'application (la bibliothèque n'installe aucun handler)."""
    logging.basicConfig(level=level or cst.LOG_LEVEL, format=cst.LOG_FORMAT)


def advisory_html(advisory):
    css_class = {'high': 'adv-high', 'medium': 'adv-medium', 'good': 'adv-good'}.get(advisory.severity, 'adv-medium')
    return f'<div class="{css_class}">{advisory.message.capitalize()}</div>'


def inject_css():
    """Injecte le style CSS de l'application."""
    st.markdown("""
        <style>
            div[data-baseweb="tab-list"] {
                display: flex !important; flex-wrap: nowrap !important; overflow-x: auto !important;
                white-space: nowrap !important; gap: 8px; padding-bottom: 8px; width: 100%;
            }
            div[data-baseweb="tab"] { flex: 0 0 auto !important; min-width: fit-content !important; }

            .timer-ok { font-family: monospace; font-size: 1.6em; color: #34d399; }
            .timer-long { font-family: monospace; font-size: 1.6em; color: #f87171; }
            .adv-high {
                background-color: #fee2e2; border-left: 5px solid #ef4444; padding: 8px 12px;
                border-radius: 5px; color: #7f1d1d; margin-bottom: 6px;
            }
            .adv-medium {
                background-color: #fef9c3; border-left: 5px solid #facc15; padding: 8px 12px;
                border-radius: 5px; color: #713f12; margin-bottom: 6px;
            }
            .adv-good {
                background-color: #d1fae5; border-left: 5px solid #10b981; padding: 8px 12px;
                border-radius: 5px; color: #064e3b; margin-bottom: 6px;
            }
            .seq-box {
                background-color: #eff6ff; border: 1px solid #bfdbfe; border-radius: 5px;
                padding: 10px; margin-bottom: 5px; color: #1e3a8a; font-size: 0.9em;
            }
        </style>
    """, unsafe_allow_html=True)

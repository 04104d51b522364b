"""
nexhex : simulateur pédagogique IRM (compromis NEX / Matrice / Epaisseur / Séquence).

Le moteur (constantes, parametres, physique, planning) est pur et sans état.
L'interface Streamlit se lance avec : streamlit run nexhex/main.py
"""

__version__ = "1.0.0"

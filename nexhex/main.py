import streamlit as st
import pandas as pd
import plotly.express as px

# IMPORTS DES MODULES LOCAUX
from nexhex import constantes as cst
from nexhex import utils
from nexhex import physique as phy
from nexhex import planning as plan
from nexhex import visualisation as vis
from nexhex.anatomie import generate_preview
from nexhex.parametres import ScanParameters

# CONFIG & CSS
st.set_page_config(layout="wide", page_title="NexHex MRI Simulator")
utils.configure_logging()
utils.inject_css()

# --- STATE MANAGEMENT ---
if 'init' not in st.session_state:
    st.session_state.reset_count = 0
    st.session_state.init = True

current_reset_id = st.session_state.reset_count

# --- BARRE LATÉRALE ---
st.sidebar.title("MRI Console")
if st.sidebar.button("⚠️ Reset Complet"):
    st.session_state.reset_count += 1
    utils.safe_rerun()

params = ScanParameters()

# SÉLECTION SÉQUENCE
seq_choix = st.sidebar.selectbox(
    "Pulse Sequence", cst.OPTIONS_SEQ,
    index=cst.OPTIONS_SEQ.index(cst.DEFAULT_PARAMS['sequence_id']),
    format_func=lambda k: cst.SEQUENCES[k].display_name,
    key=f"seq_{current_reset_id}",
)
params.set_sequence(seq_choix)
preset = params.current_preset()
st.sidebar.markdown(
    f"""<div class="seq-box"><i>{preset.description}</i><br><b>TR :</b> {preset.tr:g} ms | <b>TE :</b> {preset.te:g} ms</div>""",
    unsafe_allow_html=True,
)

st.sidebar.header("1. Réglages")
params.set_nex(st.sidebar.slider(
    "NEX (Averages)", *cst.NEX_RANGE, cst.DEFAULT_PARAMS['nex'], key=f"nex_{current_reset_id}",
    help="Controls Signal-to-Noise Ratio (SNR). Higher NEX averages out random noise.",
))
params.set_matrix_size(st.sidebar.select_slider(
    "Matrix (Resolution)", options=cst.MATRIX_OPTIONS, value=cst.DEFAULT_PARAMS['matrix_size'],
    key=f"mat_{current_reset_id}",
    help="Higher resolution adds Phase Encoding steps, directly increasing scan time.",
))
params.set_slice_thickness(st.sidebar.slider(
    "Slice Thickness (mm)", *cst.THICKNESS_RANGE, cst.DEFAULT_PARAMS['slice_thickness_mm'],
    key=f"ep_{current_reset_id}",
    help="Thinner slices need more passes/partitions (Time penalty) but reduce partial voluming.",
))

st.sidebar.header("2. Planning")
n_sequences = st.sidebar.slider(
    "Séquences par examen", *cst.SEQUENCES_PER_EXAM_RANGE, cst.DEFAULT_SEQUENCES_PER_EXAM,
    key=f"nseq_{current_reset_id}",
)

# ==============================================================================
# CALCULS
# ==============================================================================
outcome = phy.compute_outcome(params)
projection = plan.project_schedule(outcome.scan_time_seconds, n_sequences)
str_duree = phy.format_duration(outcome.scan_time_seconds)
timer_class = "timer-long" if phy.is_prolonged(outcome.scan_time_seconds) else "timer-ok"

st.title("NexHex MRI Simulator")
t_console, t_planning, t_aide = st.tabs(["🎛️ Console", "📅 Planning", "❓ Aide"])

# [TAB 1 : CONSOLE]
with t_console:
    c1, c2, c3 = st.columns([1, 1, 1])
    with c1:
        st.markdown("#### ⏱️ Total Scan Time")
        st.markdown(f"""<div class="{timer_class}">{str_duree}</div>""", unsafe_allow_html=True)
        st.markdown("#### 🔺 Triangle de Fer")
        st.plotly_chart(vis.create_iron_triangle_figure(outcome), config={'displayModeBar': False})
        k1, k2, k3 = st.columns(3)
        k1.metric("SNR", outcome.snr_score, phy.classify_score(outcome.snr_score), delta_color="off")
        k2.metric("Résolution", outcome.resolution_score, phy.classify_score(outcome.resolution_score), delta_color="off")
        k3.metric("Vitesse", outcome.speed_score, phy.classify_score(outcome.speed_score), delta_color="off")

    with c2:
        st.markdown("#### 🩻 Image Quality Analysis")
        if outcome.advisories:
            for adv in outcome.advisories:
                st.markdown(utils.advisory_html(adv), unsafe_allow_html=True)
        else:
            st.info("Aucun avertissement pour ces réglages.")
        st.markdown("#### 🧱 3D Reconstruction Impact")
        st.plotly_chart(vis.create_slice_stack_figure(params.slice_thickness_mm), config={'displayModeBar': False})
        st.caption(vis.reconstruction_caption(params.slice_thickness_mm))

    with c3:
        st.markdown("#### 🦴 Aperçu")
        img = generate_preview(params, seed=current_reset_id)
        fig = px.imshow(img, color_continuous_scale='gray', zmin=0, zmax=1)
        fig.update_layout(coloraxis_showscale=False, margin=dict(l=0, r=0, t=0, b=0), height=320)
        fig.update_xaxes(visible=False); fig.update_yaxes(visible=False)
        st.plotly_chart(fig, config={'displayModeBar': False})
        st.pyplot(vis.create_stair_step_figure(params.slice_thickness_mm))

# [TAB 2 : PLANNING]
with t_planning:
    st.markdown("### 📅 Projection de la journée (08:00 - 20:00)")
    m1, m2, m3 = st.columns(3)
    m1.metric("Durée du créneau", f"{projection.slot_minutes} min")
    m2.metric("Patients / jour", projection.slots_per_day)
    m3.metric("Recette journalière", f"{projection.daily_revenue:,.0f} $")
    st.caption(
        f"Créneau = {cst.PREP_SECONDS // 60} min préparation + {n_sequences} x {str_duree} "
        f"+ {cst.RESET_SECONDS // 60} min remise en état."
    )
    if projection.slots_per_day == 0:
        st.warning("Aucun créneau ne tient dans la journée.")
    else:
        st.dataframe(plan.schedule_to_dataframe(projection), hide_index=True)

# [TAB 3 : AIDE]
with t_aide:
    st.markdown("### 📖 Paramètres")
    resume = vis.summarize_params(params)
    st.table(pd.DataFrame({"Paramètre": list(resume.keys()), "Valeur": [str(v) for v in resume.values()]}))
    st.markdown("""
    * **NEX** : nombre de moyennages. Plus de NEX = moins de bruit, mais temps x NEX.
    * **Matrice** : lignes de codage de phase. Plus de lignes = plus de détails, mais plus de temps.
    * **Epaisseur** : coupes fines = moins de volume partiel, mais pénalité de temps (< 3 mm) et moins de signal.
    * **TR / TE** : attributs descriptifs de la séquence, non calculés.
    * **Triangle de Fer** : on ne peut pas maximiser à la fois SNR, Résolution et Vitesse.
    """)
    st.info("Modèle pédagogique simplifié : ne pas utiliser pour du diagnostic.")

import math

import matplotlib.pyplot as plt
import numpy as np
import plotly.graph_objects as go

from .parametres import ScanParameters
from .physique import DerivedOutcome, classify_score

# Couleurs des bandes de score / conseils
BAND_COLORS = {'low': '#ef4444', 'medium': '#facc15', 'high': '#4ade80'}
SEVERITY_COLORS = {'high': '#f87171', 'medium': '#facc15', 'good': '#34d399'}

ARC_SIZE_MM = 80
STEP_SCALE = 3


# --- INDICES VISUELS (valeurs pures, consommées par l'aperçu) ---
def noise_level(nex):
    """Plus de NEX = moins de bruit."""
    return (5 - nex) * 0.15


def blur_amount(matrix_size):
    """Matrice basse = image plus floue."""
    return (512 - matrix_size) / 100


def step_size(slice_thickness_mm):
    return max(1, slice_thickness_mm - 2)


def reconstruction_caption(slice_thickness_mm):
    if slice_thickness_mm <= 1:
        return "Isotropic (1mm): Smooth, continuous 3D surface."
    if slice_thickness_mm <= 3:
        return "3mm Slices: Slight jaggedness on dome, generally acceptable."
    return "Thick Slices: Severe 'pancake' artifacting destroys 3D utility."


def slice_stack(slice_thickness_mm):
    """
    Empilement de coupes formant une sphère (vue 3D).
    Retourne une liste de (largeur relative, opacité), du bas vers le haut.
    """
    n = math.ceil(20 / max(1, slice_thickness_mm * 0.5))
    stack = []
    for i in range(n):
        y = (i / (n - 1)) * 2 - 1 if n > 1 else 0.0
        radius = math.sqrt(max(0.0, 1 - y * y))
        stack.append((radius, 0.8 - abs(y) * 0.3))
    return stack


def stair_step_style(slice_thickness_mm):
    """Couleur et épaisseur du tracé en marches."""
    color = BAND_COLORS['high']
    if slice_thickness_mm > 2:
        color = BAND_COLORS['medium']
    if slice_thickness_mm > 5:
        color = BAND_COLORS['low']
    width = 3 if slice_thickness_mm > 5 else 2
    return color, width


def stair_step_path(slice_thickness_mm):
    """
    Arc d'un quart de cercle (80 mm) échantillonné en marches d'épaisseur de coupe.
    Retourne (xs, ys) dans le repère image (y vers le bas, départ en (0, 80)).
    """
    size = ARC_SIZE_MM
    effective_step = max(1, slice_thickness_mm * STEP_SCALE)
    ideal = lambda x: size - size * math.sin((x / size) * (math.pi / 2))

    xs, ys = [0.0], [float(size)]
    x = 0
    while x < size:
        next_x = min(size, x + effective_step)
        xs.append(float(next_x)); ys.append(ideal(x))
        if next_x < size:
            xs.append(float(next_x)); ys.append(ideal(next_x))
        x += effective_step
    return xs, ys


# --- FIGURES ---
def create_iron_triangle_figure(outcome: DerivedOutcome):
    """Radar SNR / Résolution / Vitesse."""
    labels = ["SNR", "Résolution", "Vitesse"]
    values = [outcome.snr_score, outcome.resolution_score, outcome.speed_score]
    weakest = classify_score(min(values))

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=values + values[:1], theta=labels + labels[:1],
        fill='toself', line=dict(color=BAND_COLORS[weakest]), name="Triangle de Fer",
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 100])),
        showlegend=False, height=350, margin=dict(l=30, r=30, t=30, b=30),
        paper_bgcolor='rgba(0,0,0,0)',
    )
    return fig


def create_slice_stack_figure(slice_thickness_mm):
    stack = slice_stack(slice_thickness_mm)
    widths = [w * 100 for w, _ in stack]
    fig = go.Figure(go.Bar(
        x=widths, y=list(range(len(stack))), orientation='h',
        base=[-w / 2 for w in widths],
        marker=dict(color='rgba(59,130,246,0.5)', opacity=[o for _, o in stack]),
        hoverinfo='skip',
    ))
    fig.update_layout(
        height=260, bargap=0.05, showlegend=False,
        margin=dict(l=10, r=10, t=10, b=10),
        xaxis=dict(visible=False, range=[-55, 55]), yaxis=dict(visible=False),
        paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)',
    )
    return fig


def create_stair_step_figure(slice_thickness_mm):
    """Structure courbe idéale (pointillés) contre sa version échantillonnée en coupes."""
    size = ARC_SIZE_MM
    x_ideal = np.linspace(0, size, 200)
    y_ideal = size - size * np.sin((x_ideal / size) * (np.pi / 2))
    xs, ys = stair_step_path(slice_thickness_mm)
    color, width = stair_step_style(slice_thickness_mm)

    fig, ax = plt.subplots(figsize=(4, 4))
    ax.plot(x_ideal, y_ideal, linestyle='--', color='#334155', linewidth=1, label="Idéal")
    ax.plot(xs, ys, color=color, linewidth=width, label=f"{slice_thickness_mm} mm")
    ax.set_xlim(0, size); ax.set_ylim(size, 0)
    ax.set_aspect('equal')
    ax.set_title("CURVED STRUCTURE", fontsize=9, family='monospace')
    ax.legend(loc='lower left', fontsize=8)
    return fig


def summarize_params(params: ScanParameters):
    preset = params.current_preset()
    return {
        "Séquence": preset.display_name,
        "TR": f"{preset.tr:g} ms",
        "TE": f"{preset.te:g} ms",
        "NEX": params.nex,
        "Matrice": f"{params.matrix_size}²",
        "Epaisseur": f"{params.slice_thickness_mm} mm",
    }

# physique.py - MOTEUR PARAMÈTRES -> RÉSULTATS
import logging
import math
from dataclasses import dataclass

from . import constantes as cst
from .parametres import ScanParameters

logger = logging.getLogger(__name__)

# Niveaux des conseils (advisories)
SEVERITY_HIGH = "high"
SEVERITY_MEDIUM = "medium"
SEVERITY_GOOD = "good"

# Bandes de score (0-100)
BAND_LOW = "low"
BAND_MEDIUM = "medium"
BAND_HIGH = "high"


@dataclass(frozen=True)
class Advisory:
    severity: str
    message: str


@dataclass(frozen=True)
class QualityScores:
    snr: int
    resolution: int
    speed: int


@dataclass(frozen=True)
class DerivedOutcome:
    preset: cst.SequencePreset
    scan_time_seconds: float
    snr_score: int
    resolution_score: int
    speed_score: int
    advisories: tuple


def round_half_up(value):
    """Arrondi au demi supérieur (comme Math.round), et non l'arrondi bancaire de round()."""
    return int(math.floor(value + 0.5))


def calculate_scan_time(params: ScanParameters) -> float:
    """
    Temps d'acquisition simplifié, en secondes.

    Formule : (Matrice / 128) * NEX * Temps de base de la séquence,
    puis pénalités multiplicatives appliquées dans l'ordre :
      - coupe < 3 mm : x1.5
      - coupe == 1 mm : x1.5 encore (soit x2.25 au total à 1 mm)
      - PD FSE 2D : x0.8
    """
    preset = params.current_preset()
    raw_seconds = (params.matrix_size / cst.REFERENCE_MATRIX) * params.nex * preset.base_time_seconds

    # Les deux pénalités d'épaisseur se cumulent (pas de elif)
    if params.slice_thickness_mm < cst.THIN_SLICE_LIMIT_MM:
        raw_seconds *= cst.THIN_SLICE_PENALTY
    if params.slice_thickness_mm == cst.ISOTROPIC_SLICE_MM:
        raw_seconds *= cst.ISOTROPIC_PENALTY

    # Séquence résolue : un identifiant inconnu se comporte comme PD_FSE
    if preset.id == "PD_FSE":
        raw_seconds *= cst.PD_FSE_FACTOR

    return raw_seconds


def calculate_quality_scores(params: ScanParameters, scan_time_seconds: float) -> QualityScores:
    """Scores du Triangle de Fer (SNR, Résolution, Vitesse)."""
    nex = params.nex
    mat = params.matrix_size
    ep = params.slice_thickness_mm

    snr = round_half_up(
        (nex / cst.MAX_NEX) * 50
        + (ep / cst.MAX_THICKNESS_MM) * 30
        + ((cst.MAX_MATRIX - mat) / cst.MAX_MATRIX) * 20
    )
    resolution = round_half_up(
        (mat / cst.MAX_MATRIX) * 60
        + ((cst.MAX_THICKNESS_MM + 1 - ep) / cst.MAX_THICKNESS_MM) * 40
    )
    # Seul le score de vitesse est borné
    speed = round_half_up(100 - (scan_time_seconds / cst.SPEED_REFERENCE_SECONDS) * 100)
    speed = min(100, max(0, speed))

    return QualityScores(snr=snr, resolution=resolution, speed=speed)


def classify_score(score):
    if score < cst.SCORE_MEDIUM_THRESHOLD:
        return BAND_LOW
    if score < cst.SCORE_HIGH_THRESHOLD:
        return BAND_MEDIUM
    return BAND_HIGH


def is_prolonged(scan_time_seconds):
    return scan_time_seconds > cst.SPEED_REFERENCE_SECONDS


# RÈGLES D'ANALYSE (évaluées toutes, dans cet ordre)
ADVISORY_RULES = (
    (SEVERITY_HIGH, "prolonged scan time raises motion-artifact risk.",
     lambda p, t: t > cst.SPEED_REFERENCE_SECONDS),
    (SEVERITY_HIGH, "minimum averaging: high noise floor.",
     lambda p, t: p.nex == 1),
    (SEVERITY_HIGH, "low matrix: severe loss of fine detail.",
     lambda p, t: p.matrix_size < 128),
    (SEVERITY_HIGH, "thick slices: pronounced stair-step artifact in reformats.",
     lambda p, t: p.slice_thickness_mm > 5),
    (SEVERITY_MEDIUM, "moderate slice thickness: visible but acceptable stepping.",
     lambda p, t: p.slice_thickness_mm == 3),
    (SEVERITY_GOOD, "isotropic-class slices: high-fidelity 3D reformat.",
     lambda p, t: p.slice_thickness_mm <= 1),
    (SEVERITY_GOOD, "balanced acquisition across all three axes.",
     lambda p, t: p.nex >= 3 and p.matrix_size >= 256 and p.slice_thickness_mm <= 3
     and t < cst.SPEED_REFERENCE_SECONDS),
)


def evaluate_advisories(params: ScanParameters, scan_time_seconds: float) -> tuple:
    """Liste complète des conseils déclenchés ; aucune règle n'en masque une autre."""
    return tuple(
        Advisory(severity, message)
        for severity, message, predicate in ADVISORY_RULES
        if predicate(params, scan_time_seconds)
    )


def compute_outcome(params: ScanParameters) -> DerivedOutcome:
    """Recalcule tous les résultats depuis l'état courant (aucun cache)."""
    preset = params.current_preset()
    scan_time = calculate_scan_time(params)
    scores = calculate_quality_scores(params, scan_time)
    advisories = evaluate_advisories(params, scan_time)

    logger.debug(
        "Résultat %s NEX=%s Mat=%s Ep=%s -> %.1f s, SNR=%s Res=%s Vit=%s, %d conseil(s)",
        preset.id, params.nex, params.matrix_size, params.slice_thickness_mm,
        scan_time, scores.snr, scores.resolution, scores.speed, len(advisories),
    )
    return DerivedOutcome(
        preset=preset,
        scan_time_seconds=scan_time,
        snr_score=scores.snr,
        resolution_score=scores.resolution,
        speed_score=scores.speed,
        advisories=advisories,
    )


def format_duration(seconds):
    """Affichage console : '2min 24s'."""
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins}min {secs}s"

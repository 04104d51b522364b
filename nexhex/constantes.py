# constantes.py
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SequencePreset:
    """Séquence d'impulsion figée (TR/TE en ms, temps de base en s pour matrice 128, NEX 1)."""
    id: str
    display_name: str
    tr: float
    te: float
    echo_train_length: int
    base_time_seconds: float
    description: str


# TABLE DES SÉQUENCES (ordre = ordre d'affichage)
SEQUENCES = {
    "UTE": SequencePreset(
        id="UTE",
        display_name="Ultrashort TE (UTE)",
        tr=10.0, te=0.05, echo_train_length=1, base_time_seconds=400.0,
        description="Excellent for cortical bone & tendon. Very short TE minimizes signal decay in solid structures.",
    ),
    "3D_GRE": SequencePreset(
        id="3D_GRE",
        display_name="3D Gradient Echo (GRE)",
        tr=20.0, te=5.0, echo_train_length=1, base_time_seconds=200.0,
        description="Fast 3D acquisition. Good for cartilage, but susceptible to magnetic susceptibility artifacts.",
    ),
    "3D_FSE": SequencePreset(
        id="3D_FSE",
        display_name="3D Fast Spin Echo (FSE)",
        tr=1500.0, te=30.0, echo_train_length=60, base_time_seconds=350.0,
        description="High SNR 3D volume. Good for reformats. Less prone to metal artifacts than GRE.",
    ),
    "PD_FSE": SequencePreset(
        id="PD_FSE",
        display_name="Proton Density (PD) FSE-2D",
        tr=3000.0, te=30.0, echo_train_length=12, base_time_seconds=180.0,
        description="The gold standard for cartilage and meniscus. Excellent anatomical detail.",
    ),
}
OPTIONS_SEQ = list(SEQUENCES.keys())
FALLBACK_SEQUENCE = "PD_FSE"

# DOMAINES DES PARAMÈTRES (bornes incluses)
NEX_RANGE = (1, 4)
MATRIX_OPTIONS = [64, 128, 192, 256, 320, 384, 448, 512]
THICKNESS_RANGE = (1, 10)
SEQUENCES_PER_EXAM_RANGE = (1, 10)

# VALEURS PAR DÉFAUT (état initial de la console)
DEFAULT_PARAMS = {'nex': 1, 'matrix_size': 128, 'slice_thickness_mm': 5, 'sequence_id': "PD_FSE"}
DEFAULT_SEQUENCES_PER_EXAM = 4

# TEMPS D'ACQUISITION
REFERENCE_MATRIX = 128
THIN_SLICE_LIMIT_MM = 3       # < 3 mm : pénalité x1.5
THIN_SLICE_PENALTY = 1.5
ISOTROPIC_SLICE_MM = 1        # == 1 mm : pénalité x1.5 supplémentaire
ISOTROPIC_PENALTY = 1.5
PD_FSE_FACTOR = 0.8

# SCORES (Triangle de Fer)
MAX_MATRIX = 512
MAX_NEX = 4
MAX_THICKNESS_MM = 10
SPEED_REFERENCE_SECONDS = 600.0   # au-delà : risque de mouvement
SCORE_MEDIUM_THRESHOLD = 40
SCORE_HIGH_THRESHOLD = 70

# PLANNING CLINIQUE
PREP_SECONDS = 600        # installation patient (10 min)
RESET_SECONDS = 300       # nettoyage / remise en état (5 min)
OPENING_HOUR = 8
CLOSING_HOUR = 20
REVENUE_PER_SLOT = 300

# JOURNALISATION
LOG_LEVEL = os.environ.get("NEXHEX_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

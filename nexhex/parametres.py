# parametres.py
import logging
from dataclasses import dataclass, replace

from . import constantes as cst

logger = logging.getLogger(__name__)


@dataclass
class ScanParameters:
    """
    Les quatre réglages de la console.

    Les setters remplacent la valeur sans contrôle de domaine : c'est la
    console (sliders, selectbox) qui ne propose que des valeurs légales.
    Utiliser validate_parameters() pour vérifier une saisie externe.
    """
    nex: int = cst.DEFAULT_PARAMS['nex']
    matrix_size: int = cst.DEFAULT_PARAMS['matrix_size']
    slice_thickness_mm: int = cst.DEFAULT_PARAMS['slice_thickness_mm']
    sequence_id: str = cst.DEFAULT_PARAMS['sequence_id']

    def set_nex(self, value):
        self.nex = value

    def set_matrix_size(self, value):
        self.matrix_size = value

    def set_slice_thickness(self, value):
        self.slice_thickness_mm = value

    def set_sequence(self, sequence_id):
        self.sequence_id = sequence_id

    def current_preset(self) -> cst.SequencePreset:
        """Séquence active. Un identifiant inconnu retombe sur PD_FSE."""
        preset = cst.SEQUENCES.get(self.sequence_id)
        if preset is None:
            logger.debug("Séquence inconnue %r, repli sur %s", self.sequence_id, cst.FALLBACK_SEQUENCE)
            preset = cst.SEQUENCES[cst.FALLBACK_SEQUENCE]
        return preset

    def copy(self) -> "ScanParameters":
        return replace(self)


def _check_int(value, field_name):
    # bool est un int en Python : on le refuse explicitement
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {value!r}.")


def _check_range(value, bounds, field_name):
    _check_int(value, field_name)
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{field_name} must be between {low} and {high}, got {value}.")


def validate_parameters(params: ScanParameters) -> ScanParameters:
    """
    Contrôle de frontière optionnel (saisie hors console).

    Rejette les valeurs hors domaine avec un ValueError explicite, sans
    jamais les corriger. Un identifiant de séquence inconnu est accepté :
    le repli sur PD_FSE est le comportement documenté.
    """
    _check_range(params.nex, cst.NEX_RANGE, "nex")
    _check_int(params.matrix_size, "matrix_size")
    if params.matrix_size not in cst.MATRIX_OPTIONS:
        raise ValueError(
            f"matrix_size must be one of {cst.MATRIX_OPTIONS}, got {params.matrix_size}."
        )
    _check_range(params.slice_thickness_mm, cst.THICKNESS_RANGE, "slice_thickness_mm")
    return params


def validate_sequences_per_exam(value):
    _check_range(value, cst.SEQUENCES_PER_EXAM_RANGE, "sequences_per_exam")
    return value

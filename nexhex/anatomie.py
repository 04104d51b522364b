# anatomie.py
import numpy as np
from scipy.ndimage import gaussian_filter, zoom

from . import visualisation as vis
from .parametres import ScanParameters


def make_humerus_phantom(size=200):
    """Tête humérale simplifiée : os cortical, moelle, et un détail courbe (la 'lésion')."""
    y, x = np.ogrid[:size, :size]
    c = size / 2.0
    dist = np.sqrt((x - c)**2 + (y - c)**2)
    img = np.zeros((size, size))
    img[dist < size * 0.35] = 0.33
    img[dist < size * 0.325] = 0.2

    # Détail fin : courbe lumineuse (trait de 3 px à l'échelle 200)
    xs = np.linspace(0.40, 0.80, 400) * size
    t = (xs - 0.40 * size) / (0.40 * size)
    ys = (0.40 - 0.10 * np.sin(2 * np.pi * t)) * size
    half_width = max(1, int(round(size * 0.0075)))
    for xc, yc in zip(xs.astype(int), ys.astype(int)):
        img[max(0, yc - half_width):yc + half_width + 1, max(0, xc - half_width):xc + half_width + 1] = 0.9
    return img


def generate_preview(params: ScanParameters, size=200, seed=0):
    """
    Aperçu dégradé selon les réglages.

    1. Échantillonnage à la matrice (512 = pleine résolution)
    2. Flou proportionnel à la perte de matrice
    3. Bruit gaussien selon le NEX
    """
    phantom = make_humerus_phantom(size)

    # Pixelisation : on sous-échantillonne puis on revient à la taille d'affichage
    factor = params.matrix_size / 512.0
    if 0 < factor < 1:
        low = zoom(phantom, factor, order=1)
        phantom = zoom(low, (size / low.shape[0], size / low.shape[1]), order=0)

    sigma = vis.blur_amount(params.matrix_size) * 0.5
    if sigma > 0:
        phantom = gaussian_filter(phantom, sigma=sigma)

    rng = np.random.default_rng(seed)
    noise = vis.noise_level(params.nex)
    if noise > 0:
        phantom = phantom + rng.normal(0, noise, phantom.shape)

    return np.clip(phantom, 0, 1)

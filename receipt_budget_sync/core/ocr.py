"""
OCR functionality for processing receipt images.
"""

from pathlib import Path

from .utils import THRESHOLD_CUTOFF, THRESHOLD_MAX


def _lazy_import_ocr_deps():
    """Lazy import heavy OCR dependencies."""
    global pytesseract, PIL_Image, cv2
    import importlib
    pytesseract = importlib.import_module("pytesseract")
    PIL_Image = importlib.import_module("PIL.Image")
    cv2 = importlib.import_module("cv2")


# Initialize on first use
pytesseract = None
PIL_Image = None
cv2 = None


class ImageDecodeError(ValueError):
    """Raised when a receipt image cannot be read or decoded."""


class OCRError(RuntimeError):
    """Raised when Tesseract fails on a receipt image."""


def load_image(img_path: Path):
    """Read a color image from disk."""
    if cv2 is None:
        _lazy_import_ocr_deps()

    img = cv2.imread(Path(img_path).as_posix(), cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ImageDecodeError(f"could not read image: {img_path}")
    return img


def preprocess_image(img):
    """
    Prepare a color (BGR) image for OCR.

    Converts to grayscale, then applies inverse binary thresholding so pixels
    brighter than THRESHOLD_CUTOFF become 0 and the rest THRESHOLD_MAX.
    """
    if cv2 is None:
        _lazy_import_ocr_deps()

    if img is None or img.size == 0:
        raise ImageDecodeError("empty image")
    gray = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY) if img.ndim == 3 else img
    _, thresh = cv2.threshold(gray, THRESHOLD_CUTOFF, THRESHOLD_MAX, cv2.THRESH_BINARY_INV)
    return thresh


def extract_text(img) -> str:
    """OCR a preprocessed image to text."""
    if pytesseract is None:
        _lazy_import_ocr_deps()

    if not isinstance(img, PIL_Image.Image):
        img = PIL_Image.fromarray(img)
    try:
        return pytesseract.image_to_string(img)
    except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, RuntimeError) as e:
        raise OCRError(f"OCR failed: {e}") from e


def ocr_receipt(img_path: Path) -> str:
    """Load, preprocess and OCR a single receipt image."""
    img = load_image(img_path)
    try:
        return extract_text(preprocess_image(img))
    except OCRError as e:
        raise OCRError(f"{Path(img_path).name}: {e}") from e

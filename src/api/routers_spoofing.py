from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List
import os
from src.api.dependencies import get_detector
from src.main.spoofing.detector import SpoofingDetector
from src.main.spoofing.preprocessing import to_gray
from src.main.texture import LBPError
from src.main.utils.io_utils import ImageIOError, read_image

router = APIRouter(prefix="/spoofing", tags=["spoofing"])

class DetectRequest(BaseModel):
    image_path: str = Field(..., description="Local image file path to analyze")

class DetectResponse(BaseModel):
    attack: bool
    histogram: List[int]
    percentages: List[float]

class LBPRequest(BaseModel):
    image_path: str = Field(..., description="Local image file path to score")
    cell_size: int | None = Field(None, description="Cell size in pixels, defaults to the configured value")

class LBPResponse(BaseModel):
    cell_size: int
    rows: int
    cols: int
    histogram: List[int]
    scored_pixels: int


def _load(image_path: str):
    if not os.path.isfile(image_path):
        raise HTTPException(status_code=404, detail='Image not found')
    try:
        return read_image(image_path)
    except ImageIOError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post('/detect', response_model=DetectResponse, summary="Decide whether an image is a spoofing attack")
def detect(req: DetectRequest, detector: SpoofingDetector = Depends(get_detector)):
    image = _load(req.image_path)
    try:
        res = detector.analyze(image)
    except LBPError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return DetectResponse(
        attack=res.attack,
        histogram=[int(v) for v in res.histogram],
        percentages=[float(v) for v in res.percentages],
    )


@router.post('/lbp', response_model=LBPResponse, summary="Run the LBP engine and return the cumulative histogram")
def lbp(req: LBPRequest, detector: SpoofingDetector = Depends(get_detector)):
    image = _load(req.image_path)
    cell_size = req.cell_size if req.cell_size is not None else detector.cell_size
    gray = to_gray(image)
    try:
        res = detector.engine.run(gray, cell_size)
    except LBPError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LBPResponse(
        cell_size=cell_size,
        rows=int(gray.shape[0]),
        cols=int(gray.shape[1]),
        histogram=[int(v) for v in res.histogram],
        scored_pixels=res.scored_pixels,
    )

"""
Gemini-backed remote code-generation routes for ComponentCraft

This is the service the generation pipeline reaches through MAGIC_API_URL.
"""
from fastapi import APIRouter, HTTPException, status
from datetime import datetime
import asyncio
import logging

from google import genai

from config.settings import GEMINI_API_KEY, GEMINI_MODEL, GENERATION_TIMEOUT
from models.component import (
    ComponentVariation,
    MagicGenerateRequest,
    MagicVariationsRequest,
    RemoteGenerationResponse,
    VariationsResponse,
)
from prompts.component_prompts import build_component_prompt, clean_code_response
from services.code_utils import detect_component_type, extract_component_name, generate_component_name

router = APIRouter(prefix="/api/magic", tags=["Magic"])
logger = logging.getLogger(__name__)

VARIATION_HINTS = [
    "",
    " Use a bolder, more colorful visual treatment.",
    " Use a minimal, understated visual treatment.",
    " Use a dark theme.",
    " Add subtle motion and hover animations.",
]


def _require_api_key() -> None:
    if not GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not set; remote generation unavailable")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Remote generation is not configured"
        )


async def generate_code_with_gemini(prompt: str) -> str:
    """Run one Gemini completion and return its text."""
    client = genai.Client(api_key=GEMINI_API_KEY)
    response = await asyncio.wait_for(
        asyncio.to_thread(
            client.models.generate_content,
            model=GEMINI_MODEL,
            contents=prompt
        ),
        timeout=GENERATION_TIMEOUT
    )
    if response and response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            text_output = "".join(part.text for part in candidate.content.parts if getattr(part, "text", None))
            if text_output:
                return text_output

    raise ValueError("Empty response from model")


async def _generate(request: MagicGenerateRequest, hint: str = "") -> RemoteGenerationResponse:
    prompt = build_component_prompt(request.prompt + hint, request.search_query, request.current_file)
    try:
        raw = await generate_code_with_gemini(prompt)
    except asyncio.TimeoutError:
        logger.error(f"Gemini generation timed out after {GENERATION_TIMEOUT}s")
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail="Model timed out")
    except Exception as e:
        logger.error(f"Gemini generation failed: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Model generation failed")

    code = clean_code_response(raw)
    if not code:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Model returned no code")

    name = extract_component_name(code) or generate_component_name(request.prompt)
    return RemoteGenerationResponse(
        code=code,
        name=name,
        explanation=f"AI-generated component for: {request.prompt}",
        source=f"AI Generation ({GEMINI_MODEL})",
        metadata={"componentType": detect_component_type(code), "quality": "ai"},
    )


@router.post("/generate", response_model=RemoteGenerationResponse)
async def magic_generate(request: MagicGenerateRequest):
    _require_api_key()
    logger.info(f"Remote generation requested: {request.prompt[:80]}")
    return await _generate(request)


@router.post("/generate-variations", response_model=VariationsResponse)
async def magic_generate_variations(request: MagicVariationsRequest):
    _require_api_key()
    variations = []
    for index in range(request.count):
        result = await _generate(request, VARIATION_HINTS[index % len(VARIATION_HINTS)])
        variations.append(ComponentVariation(
            id=index + 1,
            code=result.code,
            name=result.name,
            explanation=result.explanation or "",
            metadata=result.metadata,
            variation_index=index,
        ))

    return VariationsResponse(
        variations=variations,
        total=len(variations),
        prompt=request.prompt,
        generated_at=datetime.now().isoformat(),
    )


@router.get("/health")
async def magic_health():
    return {
        "status": "healthy" if GEMINI_API_KEY else "unconfigured",
        "model": GEMINI_MODEL,
        "timestamp": datetime.now().isoformat(),
    }

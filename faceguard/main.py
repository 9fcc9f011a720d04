from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from faceguard.config import get_settings
from faceguard.schemas import SkinProfile
from faceguard.services.recommendation import generate_recommendations
import logging

settings = get_settings()

# Set up logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def health_check():
    return {"status": "healthy", "service": settings.app_name}

@app.post("/api/recommendations")
async def create_recommendations(profile: SkinProfile):
    """Turn a classifier result into a recommendation set.

    Response envelope matches the scan endpoint so the results page can read
    either one.
    """
    try:
        recommendations = generate_recommendations(profile)
    except Exception as e:
        logger.error(f"Error generating recommendations: {str(e)}")
        raise HTTPException(status_code=500, detail="Error generating recommendations")

    return {
        "success": True,
        "data": {
            "skinType": profile.skin_type,
            "issues": [issue.model_dump(by_alias=True) for issue in profile.issues],
            "confidence": profile.confidence,
            "recommendations": recommendations.to_payload(),
        },
    }

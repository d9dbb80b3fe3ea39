from fastapi import APIRouter, Depends, HTTPException, Query

from core.service_factories import get_content_service
from domain.interfaces import IContentService
from schemas.content import ChatRequest, ChatResponse, ContentListResponse

router = APIRouter()


@router.get("/trending", response_model=ContentListResponse)
async def trending(content: IContentService = Depends(get_content_service)):
    outcome = await content.fetch_trending_outcome()
    return ContentListResponse.from_outcome(outcome)


@router.get("/categories/{category}", response_model=ContentListResponse)
async def category(category: str, content: IContentService = Depends(get_content_service)):
    outcome = await content.fetch_category_outcome(category)
    return ContentListResponse.from_outcome(outcome)


@router.get("/search", response_model=ContentListResponse)
async def search(q: str = Query(...), content: IContentService = Depends(get_content_service)):
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query must not be empty")
    outcome = await content.search_outcome(q)
    return ContentListResponse.from_outcome(outcome)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, content: IContentService = Depends(get_content_service)):
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")
    reply = await content.chat(request.history, request.message)
    return ChatResponse(reply=reply)

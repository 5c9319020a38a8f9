from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.dependencies import get_request_context
from app.collections.expense import delete_expenses_from_user_id
from app.collections.user import delete_user as db_delete_user
from app.collections.user import save_user
from app.core.security import create_access_token
from app.models.user import Language, RequestContext, User

router = APIRouter(prefix="/auth", tags=["Authentication"])


class OnboardRequest(BaseModel):
    name: str = Field(..., min_length=1)
    village: str = Field(..., min_length=1)
    crop: Optional[str] = None
    language: Language = Language.ENGLISH


class UserUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    village: Optional[str] = Field(default=None, min_length=1)
    crop: Optional[str] = None
    language: Optional[Language] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


@router.post("/onboard", response_model=Token, status_code=status.HTTP_201_CREATED)
async def onboard(request_data: OnboardRequest):
    """
    Registers a farmer with their name, village, primary crop and language
    and returns an access token for the other endpoints.
    """
    user = await save_user(
        User(
            name=request_data.name.strip(),
            village=request_data.village.strip(),
            crop=request_data.crop.strip() if request_data.crop else None,
            language=request_data.language,
        )
    )
    access_token = create_access_token(data={"sub": user.id})
    return Token(access_token=access_token, user=user)


@router.get("/user", status_code=status.HTTP_200_OK, response_model=User)
async def get_current_user(context: RequestContext = Depends(get_request_context)):
    """
    Retrieves the currently authenticated user's information.
    """
    return context.user


@router.patch("/user", status_code=status.HTTP_200_OK, response_model=User)
async def update_current_user(
    update: UserUpdateRequest,
    context: RequestContext = Depends(get_request_context),
):
    """
    Updates the profile fields that were sent, e.g. switching the language.
    """
    # crop may be cleared with null, the other fields only replaced
    changes = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key == "crop"
    }
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nothing to update.",
        )
    user = context.user.model_copy(update=changes)
    return await save_user(User.model_validate(user.model_dump()))


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_current_user(context: RequestContext = Depends(get_request_context)):
    """
    Deletes the currently authenticated user and their expenses.
    """
    await delete_expenses_from_user_id(context.user.id)
    await db_delete_user(context.user.id)
    return

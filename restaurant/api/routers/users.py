# restaurant/api/routers/users.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.domain.schemas import CredentialsIn, LoginOut, LogoutIn, MessageOut
from restaurant.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register", response_model=MessageOut, status_code=201)
def register(payload: CredentialsIn, db: Session = Depends(get_db)):
    UserService(db).register(payload.email, payload.password)
    return {"message": "Registered Successfully"}


@router.post("/login", response_model=LoginOut)
def login(payload: CredentialsIn, db: Session = Depends(get_db)):
    return UserService(db).login(payload.email, payload.password)


@router.post("/logout", response_model=MessageOut)
def logout(payload: LogoutIn, db: Session = Depends(get_db)):
    return UserService(db).logout(payload.user_id)

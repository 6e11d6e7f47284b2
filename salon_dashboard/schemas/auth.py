from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class LoggedUser(BaseModel):
    nome: str
    avatar: str


class LoginResponse(BaseModel):
    auth: bool = True
    token: str
    user: LoggedUser

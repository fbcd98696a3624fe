from pydantic import BaseModel, ConfigDict, constr


class CreatePost(BaseModel):
    title: constr(strict=True, min_length=1)
    content: constr(strict=True, min_length=1)

    model_config = ConfigDict(extra="ignore")


class UpdatePost(CreatePost):
    pass

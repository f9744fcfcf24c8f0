from contact_api.exceptions.contact import CaptchaRejectedError, DeliveryServiceError, InvalidFieldError
from contact_api.schemas.contact import ContactSent
from contact_api.utils.docs import responses


async def test__responses() -> None:
    result = responses(ContactSent, InvalidFieldError, DeliveryServiceError, CaptchaRejectedError)

    assert list(result) == [400, 403, 500, 200]
    assert result[200] == {"model": ContactSent}
    assert result[403]["description"] == f"*Captcha failed*: {CaptchaRejectedError.description}"
    assert result[400]["content"]["application/json"]["examples"] == {
        "InvalidFieldError": {"summary": "Invalid fields", "value": InvalidFieldError.example()}
    }


async def test__responses__without_model() -> None:
    assert list(responses(None, DeliveryServiceError)) == [500]

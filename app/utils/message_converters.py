"""HTTP message converters for reading and writing request/response bodies.

A converter handles one family of media types. The registry picks a reader
from the request's Content-Type and a writer from its Accept header.
"""

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import TypeVar

from flask import Response, request
from pydantic import BaseModel, ValidationError
from werkzeug.datastructures import MIMEAccept

from app.exceptions import (
    MessageNotReadableException,
    NotAcceptableException,
    UnsupportedMediaTypeException,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpMessageConverter(ABC):
    """Reads and writes Pydantic models for a set of media types."""

    media_types: tuple[str, ...] = ()

    def can_read(self, mimetype: str | None) -> bool:
        return mimetype in self.media_types

    def can_write(self, mimetype: str) -> bool:
        return mimetype in self.media_types

    @property
    def default_media_type(self) -> str:
        return self.media_types[0]

    @abstractmethod
    def read(self, model_cls: type[ModelT], body: bytes) -> ModelT:
        """Parse a request body into a model.

        Raises:
            MessageNotReadableException: If the body is malformed
        """
        pass

    @abstractmethod
    def write(self, model: BaseModel) -> bytes:
        """Serialize a model into a response body."""
        pass


class JsonMessageConverter(HttpMessageConverter):
    """JSON converter backed by Pydantic."""

    media_types = ("application/json",)

    def read(self, model_cls: type[ModelT], body: bytes) -> ModelT:
        try:
            return model_cls.model_validate_json(body)
        except ValidationError as e:
            raise MessageNotReadableException(self.default_media_type, str(e)) from e

    def write(self, model: BaseModel) -> bytes:
        return model.model_dump_json().encode("utf-8")


class XmlMessageConverter(HttpMessageConverter):
    """XML converter for flat models.

    The root element is the model's ``xml_root_element`` (or its class name
    with a lowercase first letter), with one child element per field.
    """

    media_types = ("application/xml", "text/xml")

    def read(self, model_cls: type[ModelT], body: bytes) -> ModelT:
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            raise MessageNotReadableException(self.default_media_type, str(e)) from e

        expected = _root_element_name(model_cls)
        if root.tag != expected:
            raise MessageNotReadableException(
                self.default_media_type, f"expected root element <{expected}>, got <{root.tag}>"
            )

        data = {child.tag: child.text for child in root}
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            raise MessageNotReadableException(self.default_media_type, str(e)) from e

    def write(self, model: BaseModel) -> bytes:
        root = ET.Element(_root_element_name(type(model)))
        for key, value in model.model_dump(mode="json", exclude_none=True).items():
            child = ET.SubElement(root, key)
            if isinstance(value, bool):
                child.text = "true" if value else "false"
            else:
                child.text = str(value)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _root_element_name(model_cls: type[BaseModel]) -> str:
    name = getattr(model_cls, "xml_root_element", None)
    if name:
        return name
    class_name = model_cls.__name__
    return class_name[:1].lower() + class_name[1:]


class MessageConverterRegistry:
    """Ordered list of message converters; the first one is the default writer."""

    def __init__(self, converters: list[HttpMessageConverter] | None = None) -> None:
        if converters is None:
            converters = [JsonMessageConverter(), XmlMessageConverter()]
        self._converters: list[HttpMessageConverter] = list(converters)

    @property
    def converters(self) -> tuple[HttpMessageConverter, ...]:
        return tuple(self._converters)

    def extend(self, converter: HttpMessageConverter) -> None:
        """Add a converter after the existing ones."""
        self._converters.append(converter)
        logger.debug(f"Registered message converter: {converter.__class__.__name__}")

    def reader_for(self, mimetype: str | None) -> HttpMessageConverter:
        """
        Find the converter able to read a request body.

        Raises:
            UnsupportedMediaTypeException: If no converter reads the type
        """
        for converter in self._converters:
            if converter.can_read(mimetype):
                return converter
        raise UnsupportedMediaTypeException(mimetype)

    def writer_for(self, accept: MIMEAccept) -> tuple[HttpMessageConverter, str]:
        """
        Choose the converter and media type for a response.

        Args:
            accept: Parsed Accept header

        Returns:
            Tuple of (converter, media type)

        Raises:
            NotAcceptableException: If the client accepts none of the writable types
        """
        if not self._converters:
            raise NotAcceptableException(accept.to_header() or "*/*")

        if not accept:
            first = self._converters[0]
            return first, first.default_media_type

        writable = [mt for converter in self._converters for mt in converter.media_types]
        best = accept.best_match(writable)
        if best is None:
            raise NotAcceptableException(accept.to_header())

        for converter in self._converters:
            if converter.can_write(best):
                return converter, best
        raise NotAcceptableException(accept.to_header())

    def read_request(self, model_cls: type[ModelT]) -> ModelT:
        """Read the current Flask request body into a model."""
        converter = self.reader_for(request.mimetype or None)
        return converter.read(model_cls, request.get_data())

    def write_response(self, model: BaseModel, status_code: int = 200) -> Response:
        """Write a model as a Flask response in the negotiated media type."""
        converter, mimetype = self.writer_for(request.accept_mimetypes)
        return Response(converter.write(model), status=status_code, mimetype=mimetype)

#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from .base import ValuedBaseElement
from davlite.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("D", "propfind")


class Allprop(BaseElement):
    tag: ClassVar[str] = ns("D", "allprop")


class Prop(BaseElement):
    tag: ClassVar[str] = ns("D", "prop")


# Multistatus structure
class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("D", "multistatus")


class Response(BaseElement):
    tag: ClassVar[str] = ns("D", "response")


class Href(BaseElement):
    tag: ClassVar[str] = ns("D", "href")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("D", "propstat")


class Status(BaseElement):
    tag: ClassVar[str] = ns("D", "status")


# Properties
class ResourceType(BaseElement):
    tag: ClassVar[str] = ns("D", "resourcetype")


class Collection(BaseElement):
    tag: ClassVar[str] = ns("D", "collection")


class DisplayName(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "displayname")


class GetContentLength(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getcontentlength")


class GetContentType(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getcontenttype")


class GetLastModified(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getlastmodified")


class GetEtag(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "getetag")


class CreationDate(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "creationdate")

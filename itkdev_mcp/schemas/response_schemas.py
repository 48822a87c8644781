"""Response schemas for the template and project tools

Models are built with Python field names and dumped with
model_dump(by_alias=True) to get the camelCase wire format.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Framework = Literal["drupal", "symfony"]


class TemplateInfo(BaseModel):
    """Catalog entry scraped from a template's docker-compose.yml"""
    name: str = Field(..., description="Template directory name")
    php_version: Optional[str] = Field(None, description="PHP version from the itkdev/php*-fpm image")
    web_root: Optional[str] = Field(None, description="NGINX_WEB_ROOT value")
    has_memcached: bool = Field(False, description="docker-compose.yml mentions memcached:")
    has_drush: bool = Field(False, description="docker-compose.yml mentions drush:")
    itk_version: Optional[str] = Field(None, description="# itk-version comment value")


class ProjectProfile(BaseModel):
    """What detect_project found in a project directory"""
    model_config = ConfigDict(populate_by_name=True, frozen=True, json_schema_extra={
        "example": {
            "path": "/home/dev/sites/example",
            "isItkDevProject": True,
            "hasDockerCompose": True,
            "hasEnv": True,
            "template": "drupal-11",
            "itkVersion": "3.1.0",
            "projectName": "example",
            "domain": "example.local.itkdev.dk",
            "framework": "drupal",
            "frameworkVersion": "11.1.0",
            "phpVersion": "8.3",
            "webRoot": "/app/web",
            "services": ["mariadb", "phpfpm", "nginx", "mail"],
            "hasTaskfile": True,
            "hasGitHubActions": True
        }
    })

    path: str
    is_itkdev_project: bool = Field(False, alias="isItkDevProject")
    has_docker_compose: bool = Field(False, alias="hasDockerCompose")
    has_env: bool = Field(False, alias="hasEnv")
    template: Optional[str] = Field(None, description="ITKDEV_TEMPLATE from .env")
    itk_version: Optional[str] = Field(None, alias="itkVersion")
    project_name: Optional[str] = Field(None, alias="projectName")
    domain: Optional[str] = None
    framework: Optional[Framework] = None
    framework_version: Optional[str] = Field(None, alias="frameworkVersion")
    php_version: Optional[str] = Field(None, alias="phpVersion")
    web_root: Optional[str] = Field(None, alias="webRoot")
    services: List[str] = Field(default_factory=list)
    has_taskfile: bool = Field(False, alias="hasTaskfile")
    has_github_actions: bool = Field(False, alias="hasGitHubActions")


class OutdatedFile(BaseModel):
    """A key file whose itk-version differs from the template's"""
    model_config = ConfigDict(populate_by_name=True)

    file: str
    project_version: str = Field(..., alias="projectVersion")
    template_version: str = Field(..., alias="templateVersion")
    note: Optional[str] = None


class ComparisonSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    missing: int
    outdated: int
    matching: int
    up_to_date: bool = Field(..., alias="upToDate")


class ComparisonReport(BaseModel):
    """Result of comparing a project's key files with a template"""
    model_config = ConfigDict(populate_by_name=True)

    project_path: str = Field(..., alias="projectPath")
    template: str
    missing: List[str] = Field(default_factory=list)
    outdated: List[OutdatedFile] = Field(default_factory=list)
    matching: List[str] = Field(default_factory=list)
    summary: ComparisonSummary
    recommendation: Optional[str] = None


class TemplateFileListing(BaseModel):
    """Every file a template would install"""
    template: str
    path: str = Field(..., description="Template directory on disk")
    files: List[str] = Field(default_factory=list, description="Sorted relative paths")
    count: int

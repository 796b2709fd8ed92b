from typing import Union


class Config:
    def __init__(
        self,
        build_file_name: str = "BUILD.bazel",
        workspace_file_name: str = "WORKSPACE",
        bundle_id_prefix: str = "to.do",
        minimum_os_version: str = "13.0",
        device_family: Union[str, list[str]] = "iphone",
        **kwargs
    ):
        self.build_file_name = build_file_name
        self.workspace_file_name = workspace_file_name
        self.bundle_id_prefix = bundle_id_prefix
        self.minimum_os_version = minimum_os_version
        self.device_family = device_family
        self.__dict__.update(kwargs)

    def bundle_id(self, target_name: str) -> str:
        return f"{self.bundle_id_prefix}.{target_name}"

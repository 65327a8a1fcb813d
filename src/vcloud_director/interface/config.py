import yaml
from pydantic import BaseModel
from pydantic_yaml import to_yaml_str

class ConfigFactory:

    @staticmethod
    def read_config_from_string(classname, yamlstring: str):
        return classname(**yaml.safe_load(yamlstring))

    @staticmethod
    def read_config_from_file(classname, filename: str):
        with open(filename, "r") as file:
            if classname != None:
                return classname(**yaml.safe_load(file))
            else:
                return yaml.safe_load(file)

class BaseConfig(BaseModel):

    def get_config(self):
        return to_yaml_str(self, exclude_none=True, exclude_unset=True)

    def write_config(self, filename: str):
        with open(filename, "w") as file:
            file.write(self.get_config())

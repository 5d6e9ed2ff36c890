from pydantic import BaseModel


class WeatherForecastIn(BaseModel):
    destination: str
    start_date: str
    end_date: str

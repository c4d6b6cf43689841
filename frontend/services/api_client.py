import requests
import streamlit as st
from typing import Dict, Any, Tuple
from loguru import logger
import os


class APIClient:
    def __init__(self):
        # Use environment variable for backend URL, fallback to localhost
        self.base_url = os.getenv("BACKEND_URL", "http://localhost:8000")
        self.session = requests.Session()

    def health_check(self) -> bool:
        """Check if backend API is healthy"""
        try:
            response = self.session.get(f"{self.base_url}/api/v1/bills/health", timeout=5)
            return response.status_code == 200
        except requests.RequestException as e:
            logger.error(f"Health check failed: {e}")
            return False

    def split_bill(self, payload: Dict[str, Any]) -> Tuple[bool, Dict[str, Any]]:
        """
        Send the bill to the backend and get each diner's total

        Returns:
            Tuple of (success, response_data)
        """
        try:
            response = self.session.post(
                f"{self.base_url}/api/v1/bills/split",
                json=payload,
                timeout=30
            )

            if response.status_code == 200:
                return True, response.json()
            else:
                logger.error(f"Split calculation failed: {response.status_code}")
                return False, {"error": f"Request failed with status {response.status_code}"}

        except requests.RequestException as e:
            logger.error(f"Error calling split_bill API: {e}")
            return False, {"error": str(e)}


# Global API client instance
@st.cache_resource
def get_api_client():
    return APIClient()

from patient_records.core.config import Settings
from patient_records.main import main, run_demo
from patient_records.repositories import InMemoryPatientRepository
from patient_records.services import PatientService

class TestDemo:
    
    def test_demo_scenario(self):
        """Demo registers, updates and books exactly one appointment."""
        service = PatientService(InMemoryPatientRepository(strict=False))
        lines = run_demo(service)
        
        assert lines == [
            "Patient: John Doe, Address: 456 Oak St",
            "Appointment with Dr. Smith on 2024-10-01 14:00:00, Department: Cardiology",
        ]
        
        patient = service.get_patient_information(1)
        assert patient.address == "456 Oak St"
        appointments = service.get_patient_appointments(1)
        assert [a.id for a in appointments] == [1]
    
    def test_main_prints_report(self, capsys):
        """Console entry point prints the demo report."""
        main()
        
        out = capsys.readouterr().out
        assert "Patient: John Doe, Address: 456 Oak St" in out
        assert "Department: Cardiology" in out

class TestSettings:
    
    def test_defaults(self, monkeypatch):
        """Faithful not-found policy is the default."""
        for name in ("STRICT_PATIENT_LOOKUPS", "LOG_LEVEL", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        config = Settings()
        
        assert config.STRICT_PATIENT_LOOKUPS is False
        assert config.log_level == "INFO"
    
    def test_environment_overrides(self, monkeypatch):
        """Settings are read from the environment."""
        monkeypatch.setenv("STRICT_PATIENT_LOOKUPS", "true")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        config = Settings()
        
        assert config.STRICT_PATIENT_LOOKUPS is True
        assert config.log_level == "WARNING"
    
    def test_debug_forces_debug_logging(self, monkeypatch):
        """DEBUG mode lowers the log level."""
        monkeypatch.setenv("DEBUG", "1")
        assert Settings().log_level == "DEBUG"
